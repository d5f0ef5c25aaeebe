#!/usr/bin/env python3
"""
Metric Reporter
Turns a ProbeOutcome into the ordered `id|value|` lines read by the scheduler
"""

import logging
from typing import List

import click

from .models import RESPONSE_TIME, ROLE, STATUS, UPTIME, MetricSample, ProbeOutcome, ProbeRequest

logger = logging.getLogger(__name__)

MASTER_ROLE = "master"


def build_samples(outcome: ProbeOutcome, request: ProbeRequest) -> List[MetricSample]:
    """
    Build metric samples in emission order

    Status and ResponseTime are always reported; Role and Uptime follow the
    request's metric mask. A failed outcome yields a single Status=0 sample.
    """
    if not outcome.success:
        return [MetricSample(STATUS.id, "0")]

    samples = [
        MetricSample(STATUS.id, "1"),
        MetricSample(RESPONSE_TIME.id, str(outcome.latency_ms)),
    ]

    if request.enabled(ROLE.slot):
        role = outcome.fields.get(ROLE.key)
        samples.append(MetricSample(ROLE.id, "1" if role == MASTER_ROLE else "0"))

    if request.enabled(UPTIME.slot):
        uptime = outcome.fields.get(UPTIME.key)
        if uptime is None:
            logger.warning(f"INFO reply has no {UPTIME.key}; skipping {UPTIME.name}")
        else:
            samples.append(MetricSample(UPTIME.id, uptime))

    return samples


def format_samples(samples: List[MetricSample]) -> List[str]:
    return [sample.format() for sample in samples]


def emit(samples: List[MetricSample]) -> None:
    """Write samples to stdout, one per line"""
    for line in format_samples(samples):
        click.echo(line)
