from typing import Generic, Iterator, List, Optional, TypeVar

from .errors import CapacityExceeded, Underflow

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """
    Стек (LIFO) фіксованої місткості над заздалегідь виділеним буфером.

    Місткість обирається рівно такою, яка може знадобитися алгоритму,
    тому переповнення означає помилку в алгоритмі, а не в даних.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Stack capacity must be >= 1, got {capacity}")
        self._items: List[Optional[T]] = [None] * capacity
        self._top = -1

    @property
    def capacity(self) -> int:
        return len(self._items)

    def push(self, item: T):
        """Кладе елемент на вершину. CapacityExceeded, якщо стек повний."""
        if self._top + 1 >= len(self._items):
            raise CapacityExceeded(f"Stack is full (capacity {len(self._items)})")
        self._top += 1
        self._items[self._top] = item

    def pop(self) -> T:
        """Знімає та повертає верхній елемент. Underflow, якщо стек порожній."""
        if self._top < 0:
            raise Underflow("Stack is empty")
        item = self._items[self._top]
        self._items[self._top] = None
        self._top -= 1
        return item

    def peek(self) -> T:
        """Повертає верхній елемент без видалення."""
        if self._top < 0:
            raise Underflow("Stack is empty")
        return self._items[self._top]

    def is_empty(self) -> bool:
        return self._top < 0

    def is_full(self) -> bool:
        return self._top + 1 == len(self._items)

    def __len__(self) -> int:
        return self._top + 1

    def __iter__(self) -> Iterator[T]:
        # Від дна до вершини
        for i in range(self._top + 1):
            yield self._items[i]


class BoundedQueue(Generic[T]):
    """
    Черга (FIFO) фіксованої місткості на кільцевому буфері.
    Повторні enqueue/dequeue ніколи не "втрачають" слоти.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Queue capacity must be >= 1, got {capacity}")
        self._items: List[Optional[T]] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def enqueue(self, item: T):
        if self._size == len(self._items):
            raise CapacityExceeded(f"Queue is full (capacity {len(self._items)})")
        self._items[self._tail] = item
        self._tail = (self._tail + 1) % len(self._items)
        self._size += 1

    def dequeue(self) -> T:
        if self._size == 0:
            raise Underflow("Queue is empty")
        item = self._items[self._head]
        self._items[self._head] = None
        self._head = (self._head + 1) % len(self._items)
        self._size -= 1
        return item

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._items)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        # Від голови до хвоста
        for i in range(self._size):
            yield self._items[(self._head + i) % len(self._items)]
