from src.bezier_curve.curve import BezierCurve, CurveResult, build_curve, validate_control_points
from src.bezier_curve.errors import (
    BezierError,
    DimensionMismatch,
    InsufficientControlPoints,
    InvalidComponent,
    InvalidSampleCount,
    SubdivisionLimitExceeded,
    ZeroDimension,
)
from src.bezier_curve.models import SubdivisionSettings
from src.bezier_curve.point import PointVector, distance, interpolate, turning_angle
from src.bezier_curve.sampling import sample_by_tolerance, sample_fixed_count
from src.bezier_curve.subdivide import divergence, is_straight, subdivide

__all__ = [
    "BezierCurve",
    "BezierError",
    "CurveResult",
    "DimensionMismatch",
    "InsufficientControlPoints",
    "InvalidComponent",
    "InvalidSampleCount",
    "PointVector",
    "SubdivisionLimitExceeded",
    "SubdivisionSettings",
    "ZeroDimension",
    "build_curve",
    "distance",
    "divergence",
    "interpolate",
    "is_straight",
    "sample_by_tolerance",
    "sample_fixed_count",
    "subdivide",
    "turning_angle",
    "validate_control_points",
]
