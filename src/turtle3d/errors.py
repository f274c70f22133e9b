"""
turtle3d exceptions.

Every error raised by the package derives from ``TurtleError``.  The
concrete classes also derive from the builtin exception that best
describes them, so callers that only care about ``ValueError`` keep
working.
"""


class TurtleError(Exception):
    """Base class for turtle3d errors."""


class InvalidFrameError(TurtleError, ValueError):
    """A position/heading/normal triple that is not a valid orthonormal frame."""


class IndeterminateOrientationError(TurtleError, ArithmeticError):
    """A derived axis came out with zero length, so no direction exists."""


class InvalidArgumentError(TurtleError, ValueError):
    """A non-finite or non-numeric distance, angle, width, or a bad pen style."""


class ConfigError(TurtleError, ValueError):
    """Bad turtle configuration (unit, origin, surface size, config file)."""


class ScriptError(TurtleError, ValueError):
    """A turtle script that cannot be parsed or dispatched."""

    def __init__(self, message: str, line: int = 0):
        self.message = message
        self.line = line
        if line:
            message = f"line {line}: {message}"
        super().__init__(message)
