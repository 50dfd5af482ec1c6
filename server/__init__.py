"""
FastAPI presenter server for remarkdeck.

Provides REST API and WebSocket endpoints for:
- Serving the rendered slideshow
- Reading the deck and the cursor
- Driving navigation (advance, retreat, jump)
- Pushing cursor changes to followers
"""

__version__ = "0.1.0"
