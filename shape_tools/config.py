"""
Configuration constants for shape-tools.

Modules read these values directly; there is no runtime configuration file.
"""

# ---------------------------------------------------------------
# NUMERIC TOLERANCES
# ---------------------------------------------------------------

# |denominator| below this means the two segments are treated as parallel
PARALLEL_TOLERANCE = 1e-8

# Decimal places kept when deciding whether two coordinates are the same point
COORDINATE_PRECISION = 9


# ---------------------------------------------------------------
# BOUNDARY TRACER
# ---------------------------------------------------------------

# Incoming direction used at the root before any edge has been walked
NORTH = (0.0, 1.0)


# ===============================================================
# RANDOM POLYGON GENERATOR
# ===============================================================

GENERATOR = {
    "MIN_POINTS": 20,
    "MAX_POINTS": 100,          # exclusive
    "CENTER_X_RANGE": (-180, 181),
    "CENTER_Y_RANGE": (-90, 91),
    "RADIUS_RANGE": (5, 61),
    "RADIUS_VARIATION": (0.9, 1.1),
    "X_BOUNDS": (-180.0, 180.0),
    "Y_BOUNDS": (-90.0, 90.0),
}


# ---------------------------------------------------------------
# GEOJSON OUTPUT STYLE (simplestyle properties)
# ---------------------------------------------------------------

FILL_OPACITY = 0.4
STROKE_WIDTH = 2
# Colour channels are drawn from [low, high) to keep fills pastel
COLOR_CHANNEL_RANGE = (0x80, 0xFF)
