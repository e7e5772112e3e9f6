# rectpath/domain/errors.py


class RectPathError(Exception):
    """Base class for errors raised by the geometry core."""


class ZeroLengthVectorError(RectPathError, ValueError):
    """A unit vector was requested from a vector with zero magnitude."""


class PlanningPreconditionError(RectPathError, ValueError):
    """The planner was called with inputs it cannot route (start == destination, ...)."""


class NoPathFoundError(RectPathError):
    def __init__(self, start, destination, max_depth: int):
        super().__init__(
            f"no path from {start} to {destination} within {max_depth} detour levels"
        )
        self.start, self.destination, self.max_depth = start, destination, max_depth
