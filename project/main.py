import argparse
import importlib
import os
import sys
import traceback
from typing import Callable, List, Optional

try:
    import config as cfg
except ImportError:
    print("ERROR: config.py not found. Make sure it's in the project root.")
    sys.exit(1)

from environment.errors import MazeError
from environment.loader import load_maze
from environment.solver import Solver
from visualization.animator import MazeAnimator


def _load_config() -> dict:
    """Завантажує конфігурацію з config.py."""
    try:
        importlib.reload(cfg)
        config_dict = {key: getattr(cfg, key) for key in dir(cfg) if not key.startswith('_')}
    except Exception as e:
        print(f"ERROR loading config.py: {e}")
        config_dict = {}

    config_dict.setdefault('MAZE_DIR', 'mazes')
    config_dict.setdefault('EXIT_COMMAND', 'quit')
    config_dict.setdefault('ANIMATE', True)
    config_dict.setdefault('MAX_ANIMATION_CELLS', 10_000)
    config_dict.setdefault('FRAME_BUFFER_CAPACITY', 200)
    config_dict.setdefault('MAX_CANVAS_PX', 1200)
    config_dict.setdefault('FRAME_DELAY_MS', 40)
    config_dict.setdefault('GIF_PATH', None)
    return config_dict


class ConsoleController:
    """Інтерактивний цикл: запитує файл, розв'язує лабіринт, показує результат."""

    def __init__(self, config: dict, input_func: Callable[[str], str] = input):
        self.config = config
        self.input_func = input_func

    def solve_file(self, path: str) -> bool:
        maze = load_maze(path)
        animator = None
        if maze.total_cells <= self.config['MAX_ANIMATION_CELLS']:
            animator = MazeAnimator(maze, self.config['FRAME_BUFFER_CAPACITY'],
                                    self.config['MAX_CANVAS_PX'])

        found = Solver(maze, animator).solve()

        if animator is None:
            print(f"Maze too large ({maze.total_cells} cells), no animation.\n")
        else:
            if self.config.get('GIF_PATH'):
                animator.save_gif(self.config['GIF_PATH'], self.config['FRAME_DELAY_MS'])
            if self.config['ANIMATE']:
                animator.animate(self.config['FRAME_DELAY_MS'])

        print("Path found!\n" if found else "No path.\n")
        maze.display()
        return found

    def run(self):
        maze_dir = self.config['MAZE_DIR']
        exit_command = self.config['EXIT_COMMAND']
        while True:
            try:
                name = self.input_func(f"Maze file ('{exit_command}' to exit): ").strip()
            except EOFError:
                print()
                return
            if name.lower() == exit_command.lower():
                print("Goodbye!")
                return

            path = os.path.join(maze_dir, name)
            if not os.path.isfile(path):
                print(f"File not found: {path}\n")
                continue

            try:
                self.solve_file(path)
            except MazeError as e:
                print(f"Error: {e}\n")
            except Exception as e:
                print(f"Unexpected error: {e}")
                traceback.print_exc()
                break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Maze solver (depth-first search with backtracking)')
    parser.add_argument('file', nargs='?', help='Solve this maze file once instead of starting the prompt')
    parser.add_argument('--dir', help='Directory with maze files')
    parser.add_argument('--no-animate', action='store_true', help='Do not open the animation window')
    parser.add_argument('--gif', help='Save the search animation as a GIF')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = _load_config()
    if args.dir:
        config['MAZE_DIR'] = args.dir
    if args.no_animate:
        config['ANIMATE'] = False
    if args.gif:
        config['GIF_PATH'] = args.gif

    controller = ConsoleController(config)
    if args.file:
        try:
            controller.solve_file(args.file)
        except MazeError as e:
            print(f"Error: {e}")
            return 1
        return 0

    controller.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
