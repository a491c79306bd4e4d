PRECISION = 1e-9  # absolute tolerance for Vector equality
DEGENERATE_EPS = 1e-12  # relative size of |a| at or below which the bounds quadratic is linear
CLIP_CRITICAL_PARAMS = True  # discard critical parameters outside [0, 1]

PARAM_MIN = 0.0
PARAM_MAX = 1.0
