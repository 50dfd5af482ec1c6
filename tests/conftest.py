"""
Shared fixtures: a small three-slide deck whose middle slide has two
fragments.
"""

import pytest

from remarkdeck.markup import parse_deck

SAMPLE_SOURCE = """class: center, middle
# Scala Conventions

Pitfalls and their fixes

---

# Prefer `val`

Mutable locals hide intent.

--

```scala
val total = items.map(_.price).sum
```

???
Mention immutability.

---

# Questions?
"""


@pytest.fixture
def sample_source() -> str:
    return SAMPLE_SOURCE


@pytest.fixture
def sample_deck():
    return parse_deck(SAMPLE_SOURCE)


@pytest.fixture
def deck_file(tmp_path):
    path = tmp_path / "conventions.md"
    path.write_text(SAMPLE_SOURCE, encoding="utf-8")
    return path


SETTINGS_ENV = (
    "REMARK_SCRIPT_URL",
    "REMARK_STYLESHEET",
    "REMARK_HIGHLIGHT_STYLE",
    "REMARK_RATIO",
    "OUTPUT_DIR",
    "DECK_PATH",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every settings variable; anything set during the test is removed again."""
    for name in SETTINGS_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
