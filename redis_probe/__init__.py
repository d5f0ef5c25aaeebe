"""
redis-availability-probe: single-shot Redis health probe for external schedulers
"""

from .config import build_request, normalize_password, normalize_port, parse_metric_state
from .classifier import classify_exception, is_authentication_failure
from .info_parser import parse_info
from .models import METRICS, MetricDescriptor, MetricSample, ProbeOutcome, ProbeRequest
from .prober import RedisProber, setup_logging
from .reporter import build_samples, emit, format_samples
from .exceptions import *


__version__ = "1.0.0"
__author__ = "Monitoring Team"

__all__ = [
    "RedisProber",
    "ProbeRequest",
    "ProbeOutcome",
    "MetricSample",
    "MetricDescriptor",
    "METRICS",
    "build_request",
    "parse_metric_state",
    "normalize_port",
    "normalize_password",
    "parse_info",
    "classify_exception",
    "is_authentication_failure",
    "build_samples",
    "format_samples",
    "emit",
    "setup_logging",
    "FailureKind",
    "RedisProbeException",
    "ProbeError",
    "ValidationError"
]
