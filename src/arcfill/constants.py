NODES = 5
ARCS = 2

# Progress step per animation frame and the phase bucket boundary.
SC_GAP = 0.05
SC_DIV = 0.51

# Node radius is the horizontal gap divided by this factor.
SIZE_FACTOR = 2.8
# Stroke width is min(width, height) divided by this factor.
STROKE_DIVISOR = 60

FORE_COLOR = (103, 58, 183)   # #673AB7
BACK_COLOR = (33, 33, 33)     # #212121

OFFSET_DEG = 60.0
MAX_DEG = 360.0
ROT_DEG = 90.0

# Seconds between animation steps (the 25 ms redraw cadence).
FRAME_DELAY = 0.025
# Upper bound of steps run for one tick so a stalled frame does not burst.
MAX_STEPS_PER_TICK = 4

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Double Arc Fill Rot"
UPDATE_RATE = 1 / 60
