
import pytest
from server.models import BlockView, CursorResponse
from remarkdeck.sequencer import Cursor

def make_cursor(**overrides):
    values = dict(slide_index=0, slide_number=1, slide_count=3, revealed=0,
                  fragment_count=1, is_first=True, is_terminal=False)
    values.update(overrides)
    return Cursor(**values)

def test_cursor_model():
    cursor = make_cursor(revealed=1, fragment_count=2, is_first=False)
    assert cursor.fragment_number == 2
    with pytest.raises(ValueError):
        make_cursor(slide_number=0)

def test_cursor_response_model():
    response = CursorResponse(cursor=make_cursor(), title="Intro")
    assert response.blocks == []
    assert response.notes is None
    assert response.moved is True

def test_block_view_model():
    block = BlockView(kind="code", text="val x = 1", language="scala")
    assert block.language == "scala"
    assert BlockView(kind="prose", text="hi").language is None
