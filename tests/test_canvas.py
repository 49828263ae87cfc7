import pytest

from termtd.canvas import Canvas, Cell, Style


def test_new_canvas_is_blank():
    canvas = Canvas(4, 3)
    assert all(cell.ch == " " for _, _, cell in canvas.cells())
    assert all(cell.style == Style() for _, _, cell in canvas.cells())


def test_set_then_get_round_trip():
    canvas = Canvas(10, 5)
    style = Style(foreground="lightskyblue")
    canvas.set_content(3, 2, "*", style)
    assert canvas.get_content(3, 2) == Cell("*", style)


def test_set_without_style_uses_default():
    canvas = Canvas(2, 2)
    canvas.set_content(1, 1, "#")
    assert canvas.get_content(1, 1).style == Style()


def test_writes_outside_are_ignored():
    canvas = Canvas(3, 3)
    canvas.set_content(-1, 0, "x")
    canvas.set_content(3, 0, "x")
    canvas.set_content(0, 3, "x")
    assert all(cell.ch == " " for _, _, cell in canvas.cells())


def test_read_outside_returns_empty_character():
    canvas = Canvas(3, 3)
    assert canvas.get_content(5, 5).ch == ""
    assert canvas.get_content(-1, 0).ch == ""


def test_clear_resets_content():
    canvas = Canvas(3, 3)
    canvas.set_content(0, 0, "#", Style(background="red"))
    canvas.clear()
    assert canvas.get_content(0, 0) == Cell()


def test_cells_covers_whole_grid_in_row_order():
    canvas = Canvas(3, 2)
    coords = [(x, y) for x, y, _ in canvas.cells()]
    assert coords == [(x, y) for y in range(2) for x in range(3)]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 2)