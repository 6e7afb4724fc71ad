from __future__ import annotations


class BezierError(Exception):
    """Base class for every error raised by this package."""


class InsufficientControlPoints(BezierError, ValueError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Minimum 2 control points (given {count})")
        self.count = count


class ZeroDimension(BezierError, ValueError):
    def __init__(self) -> None:
        super().__init__("Points must have at least one component")


class DimensionMismatch(BezierError, ValueError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Dimension counts don't match ({expected} and {actual})")
        self.expected = expected
        self.actual = actual


class InvalidSampleCount(BezierError, ValueError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Sample count must be at least 2 (given {count})")
        self.count = count


class SubdivisionLimitExceeded(BezierError, RuntimeError):
    pass


class InvalidComponent(BezierError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Point components must be real numbers (given {value!r})")
        self.value = value
