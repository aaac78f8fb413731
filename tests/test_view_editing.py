"""Tests for editing through the view."""

from unittest.mock import Mock

from tildepad.commands import Delete, DeleteBackward, Insert, InsertNewline
from tildepad.document import Document, Location
from tildepad.line import Line
from tildepad.terminal import Size
from tildepad.view import View


def make_view(lines, height=10, width=20):
    view = View(Mock())
    view.document = Document([Line(text) for text in lines])
    view.resize(Size(height=height, width=width))
    return view


def test_typing_into_empty_document():
    view = make_view([])
    view.handle_edit_command(Insert("é"))
    assert view.document.lines == ["é"]
    assert view.document.grapheme_count(0) == 1
    assert view.document.width_until(0, 1) == 1
    assert view.text_location == Location(0, 1)


def test_combining_mark_does_not_move_cursor():
    view = make_view([])
    view.handle_edit_command(Insert("e"))
    view.handle_edit_command(Insert("\u0301"))
    assert view.document.lines == ["e\u0301"]
    assert view.text_location == Location(0, 1)


def test_newline_splits_and_moves_to_next_line():
    view = make_view(["hello"])
    view.text_location = Location(0, 2)
    view.handle_edit_command(InsertNewline())
    assert view.document.lines == ["he", "llo"]
    assert view.text_location == Location(1, 0)


def test_newline_at_end_of_document():
    view = make_view(["a"])
    view.text_location = Location(1, 0)
    view.handle_edit_command(InsertNewline())
    assert view.document.lines == ["a", ""]
    assert view.text_location == Location(2, 0)


def test_backspace_at_line_start_joins_lines():
    view = make_view(["he", "llo"])
    view.text_location = Location(1, 0)
    view.handle_edit_command(DeleteBackward())
    assert view.document.lines == ["hello"]
    assert view.text_location == Location(0, 2)


def test_backspace_at_document_start_does_nothing():
    view = make_view(["abc"])
    view.handle_edit_command(DeleteBackward())
    assert view.document.lines == ["abc"]
    assert not view.document.is_dirty


def test_delete_removes_grapheme_under_cursor():
    view = make_view(["a日b"])
    view.text_location = Location(0, 1)
    view.handle_edit_command(Delete())
    assert view.document.lines == ["ab"]
    assert view.text_location == Location(0, 1)


def test_edits_request_redraw():
    view = make_view(["abc"])
    view.set_needs_redraw(False)
    view.handle_edit_command(Insert("x"))
    assert view.needs_redraw
