"""
Adaptive flattening of Bezier curves.

A curve is split in half until every piece is straight within an angular
tolerance. Each half is flattened independently, so after both halves
return the joint between them is checked as well and the pieces on
either side of it are split further until the joint is smooth. Splitting
a piece changes the edges meeting at its neighbouring joints, so those
joints are checked again.
"""
from __future__ import annotations

import logging
from math import pi
from typing import TYPE_CHECKING

from src.bezier_curve.errors import SubdivisionLimitExceeded
from src.bezier_curve.models import SubdivisionSettings
from src.bezier_curve.point import turning_angle

if TYPE_CHECKING:
    from src.bezier_curve.curve import BezierCurve

logger = logging.getLogger(__name__)


def _is_point(curve: BezierCurve) -> bool:
    return all(p == curve.first for p in curve.controls)


def divergence(curve: BezierCurve) -> float:
    """Angle at the midpoint of the path first -> curve(0.5) -> last."""
    midpoint = curve.evaluate(0.5)
    if (midpoint == curve.first or midpoint == curve.last) and not _is_point(curve):
        # closed loops and cusps at the midpoint have no usable angle
        return pi
    return turning_angle(curve.first, midpoint, curve.last)


def is_straight(curve: BezierCurve, tolerance: float) -> bool:
    if divergence(curve) > tolerance:
        return False
    # a degree n curve has at most n - 1 inflections; check the turn at each of n samples
    if curve.degree < 3:
        return True
    samples = curve.points(count=curve.degree)
    return all(
        turning_angle(samples[i], samples[i + 1], samples[i + 2]) < tolerance
        for i in range(len(samples) - 2)
    )


def resolve_settings(
    tolerance: float | None = None,
    settings: SubdivisionSettings | None = None,
) -> SubdivisionSettings:
    settings = settings or SubdivisionSettings.defaults()
    if tolerance is not None:
        settings = settings.with_tolerance(tolerance)
    return settings


def subdivide(
    curve: BezierCurve,
    tolerance: float | None = None,
    settings: SubdivisionSettings | None = None,
) -> list[BezierCurve]:
    """Split ``curve`` into ordered pieces, each straight within ``tolerance`` radians.

    Consecutive pieces also meet within ``tolerance``: the path
    ``a.first -> a.last -> b.last`` turns by no more than ``tolerance`` for
    every neighbouring pair ``a, b``.

    Args:
        curve: The curve to flatten.
        tolerance: Angular tolerance in radians; overrides ``settings.tolerance_rad``.
        settings: Tolerance and recursion limits, defaults from ``constants.py``.

    Raises:
        SubdivisionLimitExceeded: the recursion depth or the number of splits
            spent smoothing one joint went past the configured limit.
    """
    settings = resolve_settings(tolerance, settings)
    segments = _subdivide(curve, settings, depth=0)
    logger.debug(
        "Flattened degree %d curve into %d segments (tolerance %.6g rad)",
        curve.degree,
        len(segments),
        settings.tolerance_rad,
    )
    return segments


def _subdivide(curve: BezierCurve, settings: SubdivisionSettings, depth: int) -> list[BezierCurve]:
    if is_straight(curve, settings.tolerance_rad):
        return [curve]
    if depth >= settings.max_depth:
        logger.error("Subdivision depth limit %d reached for %r", settings.max_depth, curve)
        raise SubdivisionLimitExceeded(f"Subdivision exceeded max_depth={settings.max_depth}")

    left, right = curve.split_at(0.5)
    head = _subdivide(left, settings, depth + 1)
    tail = _subdivide(right, settings, depth + 1)
    segments = head + tail
    _smooth_joints(segments, len(head), settings)
    return segments


def joint_angle(before: BezierCurve, after: BezierCurve) -> float:
    return turning_angle(before.first, before.last, after.last)


def _smooth_joints(segments: list[BezierCurve], seam: int, settings: SubdivisionSettings) -> None:
    """Split pieces in place until the joint at ``seam`` and every joint it disturbs is smooth.

    A joint is named by the index of the piece after it. Replacing piece
    ``k`` by its halves touches joints ``k``, ``k + 1`` and ``k + 2``.
    """
    pending = [seam]
    splits = 0
    while pending:
        index = pending.pop()
        if index <= 0 or index >= len(segments):
            continue
        before, after = segments[index - 1], segments[index]
        angle = joint_angle(before, after)
        if angle <= settings.tolerance_rad:
            continue
        if splits >= settings.max_seam_splits:
            logger.error("Joint still turns %.6g rad after %d splits", angle, splits)
            raise SubdivisionLimitExceeded(
                f"Joint correction exceeded max_seam_splits={settings.max_seam_splits}"
            )
        target = index - 1 if divergence(before) > divergence(after) else index
        segments[target:target + 1] = segments[target].split_at(0.5)
        splits += 1
        pending = [i + 1 if i > target else i for i in pending]
        pending.extend((target + 2, target + 1, target))
    if splits:
        logger.debug("Smoothed joint with %d extra splits", splits)
