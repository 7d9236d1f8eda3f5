# --- Параметри консолі ---
MAZE_DIR = "mazes"
EXIT_COMMAND = "quit"

# --- Параметри анімації ---
ANIMATE = True
MAX_ANIMATION_CELLS = 10_000 # Більші лабіринти розв'язуються без анімації
FRAME_BUFFER_CAPACITY = 200 # Зберігаються лише останні кадри
MAX_CANVAS_PX = 1200
FRAME_DELAY_MS = 40
GIF_PATH = None # Шлях для збереження анімації у GIF, None - не зберігати

# --- Кольори ---
COLOR_WALL = "#000000"
COLOR_OPEN = "#FFFFFF"
COLOR_ENTRANCE = "#00FF00"
COLOR_EXIT = "#0000FF"
COLOR_MARKED = "#FF0000"
COLOR_CELL_OUTLINE = "#C0C0C0"
