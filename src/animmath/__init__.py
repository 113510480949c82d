from animmath.config import EPSILON
from animmath.vector import Vector3D, Vector3DD, Vector3DF, Vector3DI, cross, dot

__all__ = [
    "EPSILON",
    "Vector3D",
    "Vector3DD",
    "Vector3DF",
    "Vector3DI",
    "cross",
    "dot",
]
