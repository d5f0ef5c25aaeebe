#!/usr/bin/env python3
"""
Invocation Parsing
Turns the four positional probe arguments into a ProbeRequest
"""

import logging
from typing import Optional, Sequence, Tuple

from .exceptions import FailureKind, ProbeError, ValidationError
from .models import DEFAULT_PORT, DEFAULT_TIMEOUT, METRIC_SLOTS, ProbeRequest

logger = logging.getLogger(__name__)

EXPECTED_ARGUMENTS = 4

# Values the scheduler passes when no password is configured
EMPTY_PASSWORDS = ("", '""', '"')


def parse_metric_state(raw: str) -> Tuple[bool, ...]:
    """Parse a quoted comma-separated 1/0 mask into METRIC_SLOTS booleans"""
    tokens = raw.replace('"', '').split(',')
    flags = [token.strip() == '1' for token in tokens[:METRIC_SLOTS]]
    flags.extend([False] * (METRIC_SLOTS - len(flags)))
    return tuple(flags)


def normalize_port(raw: str) -> int:
    """Blank port falls back to the standard Redis port"""
    value = str(raw).strip()
    if not value:
        return DEFAULT_PORT
    if not value.isdigit():
        raise ValidationError(f"Invalid port: {raw}")
    return int(value)


def normalize_password(raw: str) -> Optional[str]:
    if raw in EMPTY_PASSWORDS:
        return None
    return raw


def build_request(args: Sequence[str], timeout: float = DEFAULT_TIMEOUT) -> ProbeRequest:
    """
    Build the probe request from positional arguments

    Args:
        args: METRIC_STATE, HOST, PORT, PASSWORD
        timeout: Connect and read deadline in seconds

    Returns:
        Immutable ProbeRequest

    Raises:
        ProbeError: when the argument count is not exactly four
        ValidationError: when the port is not numeric
    """
    if len(args) != EXPECTED_ARGUMENTS:
        raise ProbeError(FailureKind.INVALID_PARAMETERS_NUMBER)

    metric_state, host, port, password = args
    request = ProbeRequest(
        host=host,
        port=normalize_port(port),
        password=normalize_password(password),
        enabled_metrics=parse_metric_state(metric_state),
        timeout=timeout,
    )
    logger.debug(f"Probe request for {request.host}:{request.port} "
                 f"(auth={'yes' if request.password else 'no'}, timeout={request.timeout}s)")
    return request
