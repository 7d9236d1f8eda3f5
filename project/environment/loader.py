import os
from typing import List, Sequence

from .errors import MazeFileError
from .maze import Maze


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise MazeFileError(f"{name} is not an integer: {value!r}") from None


def parse_maze(lines: Sequence[str]) -> Maze:
    """
    Будує лабіринт з рядків файлу: перший рядок - кількість рядків,
    другий - кількість стовпців, далі сама сітка.
    """
    if len(lines) < 2:
        raise MazeFileError("Maze file must start with the number of rows and columns")
    rows = _parse_int(lines[0], "Row count")
    cols = _parse_int(lines[1], "Column count")
    # Пробіли значущі, прибираємо лише символи кінця рядка
    grid_lines = [line.rstrip('\r\n') for line in lines[2:]]
    return Maze(rows, cols, grid_lines)


def read_lines(path: str) -> List[str]:
    """
    Читає рядки файлу. Роздільники рядків - лише '\\n', '\\r' та '\\r\\n';
    інші керівні символи (наприклад '\\f') лишаються всередині рядка.
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MazeFileError(f"Error reading file {path}: {e}") from e
    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def load_maze(path: str) -> Maze:
    """Завантажує лабіринт з текстового файлу."""
    if not os.path.isfile(path):
        raise MazeFileError(f"Maze file not found: {path}")
    return parse_maze(read_lines(path))
