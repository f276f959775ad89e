"""Geometry constants and color definitions."""

# Animation
FULL_TURN = 360.0
CYCLE_SECONDS = 14.4  # 40 ms per degree
STEP_DEGREES = 1.0
SAMPLE_POINTS = 360

# Circle view
CENTER_OFFSET_Y = 40
TICK_HALF = 5
LABEL_OFFSET = 20
LABEL_GAP = 10
TEXT_PROBE = "Ay"  # measured for label height

# Curve view
CURVE_PADDING = 50
MARKER_RADIUS = 8

# Text blocks
READOUT_X = 16
READOUT_Y = 16
TITLE_SIZE = 23
READOUT_SIZE = 17
LEGEND_SIZE = 18
LABEL_SIZE = 20
LINE_SPACING = 1.4

# Stroke widths
AXIS_WIDTH = 2
VECTOR_WIDTH = 4

# Colors
BG_COLOR = (250, 250, 250)
AXIS_COLOR = (128, 128, 128)
INK_COLOR = (0, 0, 0)
RADIUS_COLOR = (255, 0, 0)
SIN_COLOR = (0, 0, 255)
COS_COLOR = (255, 165, 0)
