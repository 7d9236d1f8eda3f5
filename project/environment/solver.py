from typing import Callable, List, Optional, Sequence, Tuple

from .containers import BoundedQueue, BoundedStack
from .errors import SolverError
from .maze import CELL_EXIT, CELL_MARKED, CELL_OPEN, Coordinate, Maze

# Порядок обходу сусідів: ліворуч, праворуч, вгору, вниз.
# Він визначає, який із рівноцінних шляхів буде знайдено першим.
NEIGHBOR_DELTAS = ((0, -1), (0, 1), (-1, 0), (1, 0))
FRONTIER_CAPACITY = len(NEIGHBOR_DELTAS)

# Спостерігач отримує лабіринт лише для читання (get, to_lines, snapshot);
# виклик set() зі спостерігача порушує стан розв'язувача.
Observer = Callable[[Maze], None]


class Solver:
    """
    Ітеративний пошук у глибину з поверненням (backtracking) без рекурсії.

    Стан зберігається у двох паралельних стеках однакової висоти:
    стек шляху (координати від входу до поточної клітинки) та стек
    черг ще не випробуваних сусідів для кожної клітинки шляху.
    Черга сусідів обчислюється один раз при вході в клітинку і далі
    лише вичерпується, у тому числі після повернення до неї.
    """

    def __init__(self, maze: Maze, observer: Optional[Observer] = None):
        self.maze = maze
        self.observer = observer
        capacity = maze.rows * maze.cols
        self._path: BoundedStack[Coordinate] = BoundedStack(capacity)
        self._frontiers: BoundedStack[BoundedQueue[Coordinate]] = BoundedStack(capacity)
        self._visited = [[False for _ in range(maze.cols)] for _ in range(maze.rows)]
        self._finished = False
        self.steps = 0

        self.current = maze.find_entrance()
        if self.current is None:
            raise SolverError("Entrance not found")

    def _notify(self):
        if self.observer is not None:
            self.observer(self.maze)

    def is_visited(self, r: int, c: int) -> bool:
        return self._visited[r][c]

    def path(self) -> List[Coordinate]:
        """Поточний шлях від входу до поточної клітинки."""
        return list(self._path)

    def adjacents(self, cell: Coordinate) -> BoundedQueue[Coordinate]:
        """
        Повертає чергу ще не відвіданих сусідів клітинки (прохід або вихід).
        Кожен доданий сусід одразу позначається як відвіданий, тому клітинка
        потрапляє щонайбільше в одну чергу за весь пошук.
        """
        queue: BoundedQueue[Coordinate] = BoundedQueue(FRONTIER_CAPACITY)
        for dr, dc in NEIGHBOR_DELTAS:
            nr, nc = cell.row + dr, cell.col + dc
            if not self.maze.in_bounds(nr, nc):
                continue
            value = self.maze.get(nr, nc)
            if value in (CELL_OPEN, CELL_EXIT) and not self._visited[nr][nc]:
                self._visited[nr][nc] = True
                queue.enqueue(Coordinate(nr, nc))
        return queue

    def _backtrack(self):
        abandoned = self._path.pop()
        if self.maze.get(abandoned.row, abandoned.col) == CELL_MARKED:
            self.maze.set(abandoned.row, abandoned.col, CELL_OPEN)
        self.steps += 1
        self._notify()
        if not self._path.is_empty():
            # Черга сусідів цього рівня вже лежить у стеку
            self.current = self._path.peek()

    def _advance(self, frontier: BoundedQueue[Coordinate]):
        self._frontiers.push(frontier)
        nxt = frontier.dequeue()
        if self.maze.get(nxt.row, nxt.col) != CELL_EXIT:
            self.maze.set(nxt.row, nxt.col, CELL_MARKED)
        self._path.push(nxt)
        self._frontiers.push(self.adjacents(nxt))
        self.current = nxt
        self.steps += 1
        self._notify()

    def solve(self) -> bool:
        """
        Запускає пошук до знаходження виходу або вичерпання шляхів.
        Повертає True, якщо вихід знайдено; клітинки шляху лишаються позначеними.
        """
        if self._finished:
            raise SolverError("Solver has already been run; create a new one")
        self._finished = True

        start = self.current
        self._visited[start.row][start.col] = True
        self._path.push(start)
        self._frontiers.push(self.adjacents(start))
        self._notify()

        while not self._path.is_empty():
            if self.maze.get(self.current.row, self.current.col) == CELL_EXIT:
                self._notify()
                return True
            frontier = self._frontiers.pop()
            if frontier.is_empty():
                self._backtrack()
            else:
                self._advance(frontier)

        self._notify()
        return False


def solve_maze(rows: int, cols: int, lines: Sequence[str],
               observer: Optional[Observer] = None) -> Tuple[bool, Maze]:
    """Створює лабіринт з токенізованого опису та розв'язує його."""
    maze = Maze(rows, cols, lines)
    found = Solver(maze, observer).solve()
    return found, maze
