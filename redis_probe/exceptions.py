"""
Custom exceptions for redis-availability-probe
"""

from enum import Enum
from typing import Optional


class FailureKind(Enum):
    """Closed set of probe failures, each bound to its process exit code"""

    CONNECTION_FAILED = (0, "")
    UNCAUGHT = (1, "")
    INVALID_AUTHENTICATION = (2, "Invalid authentication.")
    INVALID_PARAMETERS_NUMBER = (3, "Wrong number of parameters.")
    UNKNOWN_HOST = (26, "Unknown host.")

    def __init__(self, exit_code: int, message: str):
        self.exit_code = exit_code
        self.message = message

    @property
    def is_hard(self) -> bool:
        """Hard failures abort the probe without emitting any metric"""
        return self is not FailureKind.CONNECTION_FAILED


class RedisProbeException(Exception):
    """Base exception for redis-availability-probe"""
    pass


class ProbeError(RedisProbeException):
    """Failure that terminates the probe with a dedicated exit code"""

    def __init__(self, kind: FailureKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or kind.message or kind.name)

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code


class ValidationError(RedisProbeException):
    """Input validation error"""
    pass
