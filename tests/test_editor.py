import pytest

from rasterpad.canvas import Canvas, LineAlgorithm
from rasterpad.editor import Editor, MouseButton, Tool

WHITE = (255, 255, 255, 255)


@pytest.fixture
def editor():
    return Editor(Canvas(20, 20))


def test_left_press_adds_vertex_and_paints_it(editor):
    editor.press(3, 4, MouseButton.LEFT)
    assert editor.canvas.polygon_points == [(3, 4)]
    assert editor.canvas.get_pixel(3, 4) == editor.color


def test_second_vertex_draws_connecting_line(editor):
    editor.press(2, 5, MouseButton.LEFT)
    editor.press(8, 5, MouseButton.LEFT)
    for x in range(2, 9):
        assert editor.canvas.get_pixel(x, 5) == editor.color
    assert editor.canvas.polygon_finished is False


@pytest.mark.parametrize("algorithm", [LineAlgorithm.DDA, LineAlgorithm.BRESENHAM])
def test_right_press_closes_polygon(editor, algorithm):
    editor.line_algorithm = algorithm
    for point in [(2, 2), (10, 2), (10, 10)]:
        editor.press(*point, MouseButton.LEFT)
    assert editor.canvas.get_pixel(2, 6) == WHITE
    editor.press(0, 0, MouseButton.RIGHT)
    assert editor.canvas.polygon_finished is True
    assert editor.canvas.get_pixel(6, 6) == editor.color


def test_right_press_with_two_points_finishes(editor):
    editor.press(2, 2, MouseButton.LEFT)
    editor.press(6, 2, MouseButton.LEFT)
    editor.press(0, 0, MouseButton.RIGHT)
    assert editor.canvas.polygon_finished is True
    assert editor.canvas.polygon_points == [(2, 2), (6, 2)]


def test_press_after_finish_starts_new_polygon(editor):
    editor.press(2, 2, MouseButton.LEFT)
    editor.press(6, 2, MouseButton.LEFT)
    editor.press(0, 0, MouseButton.RIGHT)
    editor.press(15, 15, MouseButton.LEFT)
    assert editor.canvas.polygon_points == [(15, 15)]
    assert editor.canvas.get_pixel(4, 2) == WHITE
    assert editor.canvas.polygon_finished is False


def test_circle_algorithm_finishes_on_second_point(editor):
    editor.line_algorithm = LineAlgorithm.CIRCLE
    editor.press(10, 10, MouseButton.LEFT)
    editor.press(15, 10, MouseButton.LEFT)
    assert editor.canvas.polygon_finished is True
    assert editor.canvas.get_pixel(15, 10) == editor.color
    assert editor.canvas.get_pixel(5, 10) == editor.color


def test_move_tool_ignores_unfinished_polygon(editor):
    editor.press(2, 2, MouseButton.LEFT)
    editor.tool = Tool.MOVE
    editor.press(4, 4, MouseButton.LEFT)
    assert editor.canvas.dragging_polygon is False
    assert editor.canvas.polygon_points == [(2, 2)]


def test_move_tool_starts_and_stops_dragging(editor):
    editor.press(2, 2, MouseButton.LEFT)
    editor.press(6, 2, MouseButton.LEFT)
    editor.press(0, 0, MouseButton.RIGHT)
    editor.tool = Tool.MOVE
    editor.press(4, 4, MouseButton.LEFT)
    assert editor.canvas.dragging_polygon is True
    assert editor.canvas.last_mouse_pos == (4, 4)
    editor.press(7, 7, MouseButton.RIGHT)
    assert editor.canvas.dragging_polygon is False
    assert editor.canvas.last_mouse_pos == (7, 7)


def test_move_without_dragging_changes_nothing(editor):
    editor.press(2, 2, MouseButton.LEFT)
    editor.move(10, 10)
    assert editor.canvas.polygon_points == [(2, 2)]
    assert editor.canvas.get_pixel(2, 2) == editor.color


def test_move_while_dragging_redraws_transformed(editor):
    editor.canvas.transformed_points = [(2, 3), (8, 3)]
    editor.canvas.dragging_polygon = True
    editor.canvas.last_mouse_pos = (1, 1)
    editor.move(4, 6)
    assert editor.canvas.last_mouse_pos == (4, 6)
    assert editor.canvas.get_pixel(5, 3) == editor.color


def test_redraw_clears_and_draws_transformed(editor):
    editor.press(15, 15, MouseButton.LEFT)
    editor.canvas.transformed_points = [(2, 2), (8, 2)]
    editor.redraw()
    assert editor.canvas.polygon_points == []
    assert editor.canvas.get_pixel(15, 15) == WHITE
    for x in range(2, 9):
        assert editor.canvas.get_pixel(x, 2) == editor.color


def test_transforms_without_transformed_points_do_nothing(editor):
    editor.canvas.polygon_points = [(5, 5), (10, 5)]
    assert editor.rotate(90) == []
    assert editor.scale(2, 2) == []
    assert editor.shear(0.5, 0) == []
    assert editor.canvas.polygon_points == [(5, 5), (10, 5)]


def test_rotate_round_trip_keeps_centre(editor):
    points = [(5, 5), (10, 5), (10, 10)]
    editor.canvas.polygon_points = list(points)
    editor.canvas.transformed_points = list(points)
    rotated = editor.rotate(90)
    assert rotated[0] == (5, 5)
    assert rotated != points
    assert editor.rotate(-90) == points
    assert editor.canvas.transformed_points == points


def test_full_turn_rotation_is_identity(editor):
    points = [(5, 5), (12, 7), (9, 14)]
    editor.canvas.polygon_points = list(points)
    editor.canvas.transformed_points = list(points)
    assert editor.rotate(360) == points


def test_unit_scale_returns_polygon(editor):
    points = [(2, 2), (8, 2), (8, 8), (2, 8)]
    editor.canvas.polygon_points = list(points)
    editor.canvas.transformed_points = list(points)
    assert editor.scale(1, 1) == points
    assert editor.canvas.transformed_points == points


def test_zero_shear_returns_polygon(editor):
    points = [(2, 3), (8, 4), (6, 9)]
    editor.canvas.polygon_points = list(points)
    editor.canvas.transformed_points = [(0, 0)]
    assert editor.shear(0.0, 0) == points
    assert editor.shear(0.0, 1) == points


def test_clear_resets_canvas(editor):
    editor.press(3, 3, MouseButton.LEFT)
    editor.clear()
    assert editor.canvas.polygon_points == []
    assert editor.canvas.get_pixel(3, 3) == WHITE


def test_save_and_open_round_trip(editor, tmp_path):
    editor.press(4, 7, MouseButton.LEFT)
    path = tmp_path / "drawing.png"
    editor.save_image(path)
    other = Editor(Canvas(5, 5))
    other.open_image(path)
    assert (other.canvas.width, other.canvas.height) == (20, 20)
    assert other.canvas.get_pixel(4, 7) == editor.color
    assert other.canvas.get_pixel(0, 0) == WHITE


def test_open_missing_file_raises(editor, tmp_path):
    with pytest.raises(OSError):
        editor.open_image(tmp_path / "missing.png")


def test_save_unknown_extension_raises(editor, tmp_path):
    with pytest.raises(ValueError):
        editor.save_image(tmp_path / "drawing.nosuchformat")