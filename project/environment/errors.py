class MazeError(Exception):
    """Базовий клас для всіх помилок лабіринту та розв'язувача."""


class InvalidDimensions(MazeError):
    """Неправильні розміри лабіринту або неповна карта."""


class InvalidEntrance(MazeError):
    """Кількість входів не дорівнює 1 або вхід не на межі."""


class InvalidExit(MazeError):
    """Кількість виходів не дорівнює 1."""


class OutOfBounds(MazeError):
    """Координата поза межами лабіринту."""


class ImmutableCell(MazeError):
    """Спроба змінити стіну, вхід або вихід."""


class CapacityExceeded(MazeError):
    """Обмежена структура вже заповнена."""


class Underflow(MazeError):
    """Спроба взяти елемент з порожньої структури."""


class SolverError(MazeError):
    pass


class MazeFileError(MazeError):
    """Помилка читання або розбору файлу лабіринту."""
