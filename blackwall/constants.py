from enum import Enum, auto

# Frame rate of the main loop (frames per second). Roughly a 16 ms sleep.
TICK_RATE = 60

# How often to fully refresh the screen to avoid artefacts (seconds)
UI_REFRESH_INTERVAL = 5.0

# Geometric price growth per unit already owned
COST_SCALE_FACTOR = 1.15
BUFF_COST_SCALE_FACTOR = 1.5
CLICK_SHARE_COST_SCALE_FACTOR = 1.8

BUFF_BASE_COST = 1000.0
BUFF_STEP = 0.1
CLICK_SHARE_BASE_COST = 500.0
CLICK_SHARE_STEP = 0.01

# DATA granted by a manual breach before any click share or boost
BASE_CLICK_AMOUNT = 1.0

# Transient display timers (seconds)
CLICK_FEEDBACK_DURATION = 0.35
CACHE_FEEDBACK_DURATION = 2.0
AUTOSAVE_FEEDBACK_DURATION = 2.0
AUTOSAVE_INTERVAL = 30.0

# Data cache bonus event. Spawn delays are whole seconds.
CACHE_FIRST_SPAWN_MAX = 90
CACHE_RESPAWN_MIN = 45
CACHE_RESPAWN_SPREAD = 45
CACHE_CATCH_WINDOW = 10.0
CACHE_BUFF_DURATION = 30.0
CACHE_BUFF_PERCENT = 777.0

# Bump whenever the save layout changes. Older saves are ignored.
SAVE_VERSION = 5
SAVE_PATH = "save_data.dat"
LOG_FILE = "blackwall.log"

# Number of HUD event log lines kept
EVENT_LOG_SIZE = 5

# Height of the header panel, including its border
HEADER_HEIGHT = 3
# Smallest screen the layout is composed for
MIN_WIDTH = 80
MIN_HEIGHT = 36

# Fixed colour for plain UI text (RGB)
UI_COLOR_RGB = (255, 255, 255)

ESCAPE = "\x1b"

QUIT_KEYS = ("q", "Q", ESCAPE)
CLICK_KEY = " "
BUY_BUFF_KEY = "b"
BUY_CLICK_SHARE_KEY = "c"
SAVE_KEY = "s"
LOAD_KEY = "l"
CATCH_CACHE_KEY = "g"
HELP_KEY = "h"


class Color(Enum):
    """Logical colour identifiers used for rendering."""

    UI = auto()
    TITLE = auto()
    AFFORDABLE = auto()
    UNAFFORDABLE = auto()
    FEEDBACK = auto()
    NOTICE = auto()
    ALERT = auto()
    HIGHLIGHT = auto()
