"""
Failure classification for probe errors

Authentication failures are recognised by matching the server's error text.
The markers live here, and only here, so they can follow upstream wording
changes without touching the rest of the pipeline.
"""

import socket
from typing import Optional

import redis

from .exceptions import FailureKind, ProbeError

# Case-sensitive fragments of Redis authentication error replies
AUTH_FAILURE_MARKERS = (
    "NOAUTH",
    "WRONGPASS",
    "invalid password",
    "invalid username-password pair",
    "Authentication required",
    "no password is set",
    "without any password configured",
)


def is_authentication_failure(exc: BaseException) -> bool:
    """True when the error means the credential was rejected or is missing"""
    if isinstance(exc, redis.exceptions.AuthenticationError):
        return True
    message = str(exc)
    return any(marker in message for marker in AUTH_FAILURE_MARKERS)


def _exception_chain(exc: BaseException):
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def is_name_resolution_failure(exc: BaseException) -> bool:
    """True when a socket-level DNS lookup failure caused the error"""
    return any(isinstance(link, socket.gaierror) for link in _exception_chain(exc))


def classify_exception(exc: BaseException) -> FailureKind:
    """
    Map an error raised while probing onto a FailureKind.
    """
    if isinstance(exc, ProbeError):
        return exc.kind

    if is_authentication_failure(exc):
        return FailureKind.INVALID_AUTHENTICATION

    if is_name_resolution_failure(exc):
        return FailureKind.UNKNOWN_HOST

    if isinstance(exc, (redis.exceptions.RedisError, OSError)):
        return FailureKind.CONNECTION_FAILED

    return FailureKind.UNCAUGHT
