"""
Main FastAPI application.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from remarkdeck.config import load_settings
from remarkdeck.markup import load_deck
from remarkdeck.models import CodeSnippet
from remarkdeck.renderers import HTMLRenderer
from remarkdeck.sequencer import OutOfRangeError, SlideSequencer
from server.models import BlockView, CursorResponse
from server.websocket_manager import ConnectionManager


def create_app(deck_path: Optional[Path] = None) -> FastAPI:
    """
    Build the presenter app.

    Args:
        deck_path: Deck to present (default: DECK_PATH from the environment)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        settings = load_settings()
        path = deck_path or settings.deck_path
        app.state.settings = settings
        app.state.sequencer = None
        if path:
            deck = load_deck(Path(path))
            app.state.sequencer = SlideSequencer(deck)
            print(f"[Server] Presenting {path} ({len(deck)} slides)")
        else:
            print("[Server] Warning: no deck configured (set DECK_PATH)")
        yield
        # Shutdown
        pass

    app = FastAPI(
        title="remarkdeck presenter",
        description="Present remark slide decks and drive navigation over HTTP",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:3001"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # WebSocket connection manager
    manager = ConnectionManager()
    app.state.manager = manager

    def get_sequencer(request: Request) -> SlideSequencer:
        sequencer = request.app.state.sequencer
        if sequencer is None:
            raise HTTPException(status_code=503, detail="No deck loaded")
        return sequencer

    def cursor_response(sequencer: SlideSequencer, moved: bool = True) -> CursorResponse:
        slide = sequencer.current()
        return CursorResponse(
            cursor=sequencer.cursor,
            title=slide.title,
            blocks=[
                BlockView(
                    kind=block.kind,
                    text=block.text,
                    language=block.language if isinstance(block, CodeSnippet) else None,
                )
                for block in sequencer.visible_blocks()
            ],
            notes=slide.notes,
            moved=moved,
        )

    async def publish(sequencer: SlideSequencer, moved: bool) -> CursorResponse:
        response = cursor_response(sequencer, moved)
        if moved:
            await manager.broadcast(response.model_dump_json())
        return response

    # --- API Endpoints ---

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "message": "remarkdeck presenter is running"}

    @app.get("/deck", response_class=HTMLResponse)
    async def slideshow(request: Request):
        """The remark slideshow page for the loaded deck."""
        sequencer = get_sequencer(request)
        settings = request.app.state.settings
        renderer = HTMLRenderer(
            options=settings.remark,
            script_url=settings.script_url,
            stylesheet=settings.stylesheet,
        )
        return HTMLResponse(renderer.render_string(sequencer.deck))

    @app.get("/api/deck")
    async def get_deck(request: Request):
        """The deck content model as JSON."""
        return get_sequencer(request).deck.to_dict()

    @app.get("/api/cursor", response_model=CursorResponse)
    async def get_cursor(request: Request):
        """Current cursor and revealed slide content."""
        return cursor_response(get_sequencer(request))

    @app.post("/api/cursor/advance", response_model=CursorResponse)
    async def advance(request: Request):
        """Reveal the next fragment or move to the next slide."""
        sequencer = get_sequencer(request)
        return await publish(sequencer, sequencer.advance())

    @app.post("/api/cursor/retreat", response_model=CursorResponse)
    async def retreat(request: Request):
        """Step back one fragment or slide."""
        sequencer = get_sequencer(request)
        return await publish(sequencer, sequencer.retreat())

    @app.post("/api/cursor/jump/{index}", response_model=CursorResponse)
    async def jump(index: int, request: Request):
        """Jump to a slide (0-based) with nothing revealed."""
        sequencer = get_sequencer(request)
        try:
            sequencer.jump_to(index)
        except OutOfRangeError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return await publish(sequencer, True)

    # --- WebSocket for cursor updates ---

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        """
        WebSocket endpoint pushing the cursor after every navigation.
        """
        await manager.connect(websocket)

        try:
            while True:
                data = await websocket.receive_text()

                # Echo back for heartbeat
                if data == "ping":
                    await websocket.send_text("pong")

        except WebSocketDisconnect:
            manager.disconnect(websocket)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
