from typing import List, Optional

from PIL import Image, ImageDraw

import config as cfg
from environment.maze import (CELL_ENTRANCE, CELL_EXIT, CELL_MARKED,
                              CELL_WALL, Maze)

CELL_COLORS = {
    CELL_WALL: cfg.COLOR_WALL,
    CELL_ENTRANCE: cfg.COLOR_ENTRANCE,
    CELL_EXIT: cfg.COLOR_EXIT,
    CELL_MARKED: cfg.COLOR_MARKED,
}


def cell_size_for(maze: Maze, max_canvas_px: int = cfg.MAX_CANVAS_PX) -> int:
    """Розмір клітинки в пікселях, щоб кадр вміщався у max_canvas_px."""
    return max(1, min(max_canvas_px // maze.cols, max_canvas_px // maze.rows))


def render_maze(maze: Maze, cell_size: int) -> Image.Image:
    """Малює поточний стан лабіринту в PIL Image."""
    image = Image.new("RGB", (maze.cols * cell_size, maze.rows * cell_size), cfg.COLOR_OPEN)
    draw = ImageDraw.Draw(image)
    for r, line in enumerate(maze.to_lines()):
        for c, cell in enumerate(line):
            x1, y1 = c * cell_size, r * cell_size
            x2, y2 = x1 + cell_size, y1 + cell_size
            draw.rectangle((x1, y1, x2, y2),
                           fill=CELL_COLORS.get(cell, cfg.COLOR_OPEN),
                           outline=cfg.COLOR_CELL_OUTLINE)
    return image


class MazeAnimator:
    """
    Спостерігач для Solver: після кожного кроку зберігає кадр у кільцевий буфер.
    Коли буфер заповнений, найстаріший кадр перезаписується.
    """
    def __init__(self, maze: Maze, capacity: int = cfg.FRAME_BUFFER_CAPACITY,
                 max_canvas_px: int = cfg.MAX_CANVAS_PX):
        if capacity < 1:
            raise ValueError(f"Frame buffer capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self.cell_size = cell_size_for(maze, max_canvas_px)
        self._buffer: List[Optional[Image.Image]] = [None] * capacity
        self._start = 0
        self._count = 0

    def __call__(self, maze: Maze):
        self.capture_frame(maze)

    @property
    def frame_count(self) -> int:
        return self._count

    def capture_frame(self, maze: Maze):
        image = render_maze(maze, self.cell_size)
        if self._count < self.capacity:
            self._buffer[(self._start + self._count) % self.capacity] = image
            self._count += 1
        else:
            self._buffer[self._start] = image
            self._start = (self._start + 1) % self.capacity

    def frames(self) -> List[Image.Image]:
        """Кадри від найстарішого до найновішого."""
        return [self._buffer[(self._start + i) % self.capacity] for i in range(self._count)]

    def save_gif(self, path: str, delay_ms: int = cfg.FRAME_DELAY_MS) -> bool:
        frames = self.frames()
        if not frames:
            print("Warning: No frames captured, GIF not saved.")
            return False
        frames[0].save(path, save_all=True, append_images=frames[1:],
                       duration=delay_ms, loop=0)
        print(f"Animation saved to {path}")
        return True

    def animate(self, delay_ms: int = cfg.FRAME_DELAY_MS) -> bool:
        """
        Відкриває вікно tkinter та циклічно показує збережені кадри.
        Повертає False, якщо вікно відкрити неможливо (немає дисплея або Tk).
        """
        frames = self.frames()
        if not frames:
            return False
        try:
            import tkinter as tk
        except ImportError as e:
            print(f"Warning: tkinter is not available, animation skipped: {e}")
            return False
        try:
            root = tk.Tk()
        except tk.TclError as e:
            print(f"Warning: Cannot open animation window: {e}")
            return False
        root.title("Maze search")
        panel = AnimationPanel(frames)
        label = tk.Label(root)
        label.pack()

        def tick():
            label.config(image=panel.photo())
            panel.next_frame()
            root.after(delay_ms, tick)

        tick()
        root.mainloop()
        return True


class AnimationPanel:
    """Перемикає кадри по колу та тримає посилання на поточне PhotoImage."""
    def __init__(self, frames: List[Image.Image]):
        self.frames = frames
        self.index = 0
        self._photo = None # Посилання, щоб зображення не зібрав GC

    def current(self) -> Image.Image:
        return self.frames[self.index]

    def next_frame(self):
        if self.frames:
            self.index = (self.index + 1) % len(self.frames)

    def photo(self):
        from PIL import ImageTk
        self._photo = ImageTk.PhotoImage(self.current())
        return self._photo
