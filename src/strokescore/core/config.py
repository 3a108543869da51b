"""
Shared engine constants.

Distances are in the units of the capture surface (pixels for a mouse or
touch canvas); angles are in degrees.
"""

# Rotation sweep resolution and the number of angles evaluated per batch
ROTATION_STEP_DEGREES = 0.25
ROTATION_CHUNK_SIZE = 360

# Below this endpoint span a stroke is treated as a dot and left unscaled
MIN_SCALE_SPAN = 1e-6

# Decimation keeps every Nth captured point
DECIMATION_STRIDE = 4

# d_max = reference length * DMAX_FRACTION; a Fréchet distance of d_max scores 0
DMAX_FRACTION = 0.25
MAX_SCORE = 100.0
MIN_SCORE = 0.0

# Misrotation penalty applies strictly between these magnitudes and removes
# at most ANGLE_PENALTY_POINTS at 180 degrees
ANGLE_PENALTY_MIN_DEGREES = 10.0
ANGLE_PENALTY_MAX_DEGREES = 170.0
ANGLE_PENALTY_POINTS = 10.0

# Douglas-Peucker tolerance for the noise diagnostic
NOISE_EPSILON = 1.0
# Points subtracted per unit of noise penalty; 0 keeps it diagnostic-only
NOISE_PENALTY_WEIGHT = 0.0

# Default reference sample count when none is given
DEFAULT_REFERENCE_SAMPLES = 50
