# animmath/config.py
"""
Process-wide numeric constants.

EPSILON is the length below which a vector is treated as zero by the
normalize family. It is compared after conversion to the vector's scalar type.
"""
import numpy as np

EPSILON = np.float32(1e-6)
