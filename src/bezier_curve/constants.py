from copy import deepcopy
from math import pi

DEFAULT_CONSTANTS = {
    "tolerance_rad": pi / 64,
    "limits": {
        "max_depth": 48,
        "max_seam_splits": 256,
    },
}


def default_constants() -> dict:
    return deepcopy(DEFAULT_CONSTANTS)
