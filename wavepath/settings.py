# wavepath global settings

# Root finding
BISECTION_ITERATIONS = 22  # fixed count, resolution ~2e-7 of the unit interval
SOLVE_FALLBACK_T = 0.5     # returned when a segment does not straddle the target Y

# Path output
COORD_DECIMALS = 2
WINDING_RULE = "NONZERO"

# Wave defaults
DEFAULT_NUM_WAVES = 4

# Host stand-in (SVG sink)
STROKE_COLOR = (0.094, 0.627, 0.984)  # RGB in [0, 1]
STROKE_WEIGHT = 2.0
SVG_MARGIN = 20.0
