"""
constants.py: Centralized configuration for the field, the player marker and input.
"""

# -------- Field Measurements (metres) --------
SCALE = 5                       # Pixels per metre
FIELD_WIDTH_M = 70              # Touchline to touchline
FIELD_LENGTH_M = 100            # Try line to try line
DEAD_BALL_M = 22                # In-goal area behind each try line
MARGIN_M = 10                   # Run-off around the pitch

# Canvas is the pitch plus margins, in pixels
CANVAS_WIDTH = (FIELD_WIDTH_M + 2 * MARGIN_M) * SCALE
CANVAS_HEIGHT = (FIELD_LENGTH_M + 2 * DEAD_BALL_M + 2 * MARGIN_M) * SCALE

# -------- Field Drawing --------
FIELD_INSET = 50                # Playing area rectangle inset (pixels)
TRY_LINE_OFFSET = 150
TWENTY_TWO_OFFSET = 250
LINE_WIDTH = 2
LABEL_OFFSET = 25               # Distance labels, measured in from the canvas edge

GRASS_COLOR = (0, 191, 0)
OUTER_GRASS_COLOR = (0, 153, 0)
LINE_COLOR = (255, 255, 255)
BORDER_COLOR = (51, 51, 51)

FONT_NAME = None                # pygame default font
FONT_SIZE = 16

# -------- Player Marker --------
PLAYER_RADIUS = 8
DISTANCE_BELOW_HALFWAY = 5 * SCALE
PLAYER_COLOR = (255, 255, 255)
PLAYER_STROKE_COLOR = (0, 0, 0)

# -------- Movement (pixels / tick) --------
MOVEMENT_SPEED = 0.6
SPRINT_SPEED = 1.2

# -------- Input --------
DEAD_ZONE = 0.1
MAX_GAMEPADS = 4
ANALOG_LEFT_X = 0
ANALOG_LEFT_Y = 1
BUTTON_RT = 7

# -------- Timing --------
TARGET_FPS = 60                 # Simulation ticks per second
FRAME_INTERVAL = 1.0 / TARGET_FPS
HOST_FRAME_RATE = 120           # How often the window loop wakes up
FPS_WINDOW = 1.0                # Seconds per FPS sample
