#!/usr/bin/env python3
"""
Probe Data Models
Data structures shared by the connect/query/report pipeline
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .exceptions import FailureKind

DEFAULT_PORT = 6379
DEFAULT_TIMEOUT = 5.0
METRIC_SLOTS = 7


@dataclass(frozen=True)
class ProbeRequest:
    """Connection parameters for a single probe run"""
    host: str
    port: int = DEFAULT_PORT
    password: Optional[str] = None
    enabled_metrics: Tuple[bool, ...] = (True,) * METRIC_SLOTS
    timeout: float = DEFAULT_TIMEOUT

    def enabled(self, slot: int) -> bool:
        if slot < 0 or slot >= len(self.enabled_metrics):
            return False
        return self.enabled_metrics[slot]


@dataclass(frozen=True)
class MetricDescriptor:
    """Static definition of a reported metric"""
    name: str
    id: str
    slot: int
    key: Optional[str] = None


STATUS = MetricDescriptor("Status", "9999:Status:99", 0)
RESPONSE_TIME = MetricDescriptor("ResponseTime", "9999:Response Time:99", 1)
ROLE = MetricDescriptor("Role", "9999:Role:99", 2, key="role")
UPTIME = MetricDescriptor("Uptime", "9999:Uptime:99", 3, key="uptime_in_seconds")

# Emission order is part of the output contract
METRICS: Tuple[MetricDescriptor, ...] = (STATUS, RESPONSE_TIME, ROLE, UPTIME)


@dataclass(frozen=True)
class MetricSample:
    """One reported fact"""
    id: str
    value: str

    def format(self) -> str:
        return f"{self.id}|{self.value}|"


@dataclass
class ProbeOutcome:
    """Result of one probe: either measured fields or a failure kind"""
    success: bool
    latency_ms: Optional[int] = None
    fields: Dict[str, str] = field(default_factory=dict)
    failure: Optional[FailureKind] = None

    @classmethod
    def succeeded(cls, latency_ms: int, fields: Dict[str, str]) -> "ProbeOutcome":
        return cls(success=True, latency_ms=latency_ms, fields=dict(fields))

    @classmethod
    def failed(cls, kind: FailureKind) -> "ProbeOutcome":
        return cls(success=False, failure=kind)
