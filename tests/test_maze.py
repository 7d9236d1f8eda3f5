import pytest

from environment.errors import (ImmutableCell, InvalidDimensions,
                                InvalidEntrance, InvalidExit, OutOfBounds)
from environment.maze import (CELL_ENTRANCE, CELL_EXIT, CELL_MARKED,
                              CELL_OPEN, CELL_WALL, Coordinate, Maze)

CORRIDOR = ["#####", "E   S", "#####"]


def test_maze_reads_cells():
    maze = Maze(3, 5, CORRIDOR)
    assert maze.rows == 3 and maze.cols == 5
    assert maze.total_cells == 15
    assert maze.get(0, 0) == CELL_WALL
    assert maze.get(1, 0) == CELL_ENTRANCE
    assert maze.get(1, 2) == CELL_OPEN
    assert maze.get(1, 4) == CELL_EXIT
    assert maze.find_entrance() == Coordinate(1, 0)
    assert maze.find_exit() == Coordinate(1, 4)
    assert maze.to_lines() == CORRIDOR


def test_short_rows_are_padded_and_long_rows_truncated():
    maze = Maze(2, 4, ["E", "S#xxxx"])
    assert maze.to_lines() == ["E   ", "S#  "]


def test_unknown_characters_are_open():
    maze = Maze(1, 4, ["E.xS"])
    assert maze.get(0, 1) == CELL_OPEN
    assert maze.get(0, 2) == CELL_OPEN


@pytest.mark.parametrize("rows, cols, lines", [
    (0, 3, []),
    (2, 0, ["", ""]),
    (3, 5, ["#####", "E   S"]),
])
def test_invalid_dimensions(rows, cols, lines):
    with pytest.raises(InvalidDimensions):
        Maze(rows, cols, lines)


@pytest.mark.parametrize("lines", [
    ["#####", "#   S", "#####"],   # немає входу
    ["#E###", "E   S", "#####"],   # два входи
    ["#####", "# E S", "#####"],   # вхід не на межі
])
def test_invalid_entrance(lines):
    with pytest.raises(InvalidEntrance):
        Maze(3, 5, lines)


@pytest.mark.parametrize("lines", [
    ["#####", "E    ", "#####"],
    ["###S#", "E   S", "#####"],
])
def test_invalid_exit(lines):
    with pytest.raises(InvalidExit):
        Maze(3, 5, lines)


def test_exit_may_be_inside_the_grid():
    maze = Maze(3, 3, ["#E#", "#S#", "###"])
    assert maze.find_exit() == Coordinate(1, 1)


def test_off_border_entrance_message_names_the_cell():
    with pytest.raises(InvalidEntrance, match=r"\(1,2\)"):
        Maze(3, 5, ["#####", "# E S", "#####"])


@pytest.mark.parametrize("r, c", [(-1, 0), (0, -1), (3, 0), (0, 5)])
def test_out_of_bounds_access(r, c):
    maze = Maze(3, 5, CORRIDOR)
    assert not maze.in_bounds(r, c)
    with pytest.raises(OutOfBounds):
        maze.get(r, c)
    with pytest.raises(OutOfBounds):
        maze.set(r, c, CELL_MARKED)


def test_mark_and_unmark_open_cell():
    maze = Maze(3, 5, CORRIDOR)
    maze.set(1, 2, CELL_MARKED)
    assert maze.get(1, 2) == CELL_MARKED
    assert maze.to_lines()[1] == "E * S"
    assert maze.marked_cells() == {Coordinate(1, 2)}

    maze.set(1, 2, CELL_OPEN)
    assert maze.get(1, 2) == CELL_OPEN
    assert maze.to_lines() == CORRIDOR


@pytest.mark.parametrize("r, c, value", [
    (0, 0, CELL_MARKED),   # стіна
    (1, 0, CELL_MARKED),   # вхід
    (1, 4, CELL_OPEN),     # вихід
    (1, 2, CELL_WALL),     # лише прохід/позначка
])
def test_structural_cells_are_immutable(r, c, value):
    maze = Maze(3, 5, CORRIDOR)
    with pytest.raises(ImmutableCell):
        maze.set(r, c, value)
    assert maze.to_lines() == CORRIDOR


def test_marked_input_cell_starts_marked():
    maze = Maze(1, 4, ["E*S "])
    assert maze.get(0, 1) == CELL_MARKED
    assert maze.to_lines() == ["E*S "]
    maze.set(0, 1, CELL_OPEN)
    assert maze.to_lines() == ["E S "]


def test_snapshot_is_an_immutable_copy():
    maze = Maze(3, 5, CORRIDOR)
    snap = maze.snapshot()
    maze.set(1, 1, CELL_MARKED)
    assert snap == tuple(CORRIDOR)
    assert maze.snapshot()[1] == "E*  S"


def test_display_prints_grid(capsys):
    Maze(3, 5, CORRIDOR).display()
    assert capsys.readouterr().out.splitlines() == CORRIDOR
