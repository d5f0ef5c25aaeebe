#!/usr/bin/env python3
"""
redis-availability-probe CLI Interface
"""

import click
import logging
import sys

from .config import build_request
from .exceptions import FailureKind, ProbeError
from .models import DEFAULT_TIMEOUT
from .prober import RedisProber, setup_logging
from .reporter import build_samples, emit


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument('arguments', nargs=-1)
@click.option('--timeout', type=float, default=DEFAULT_TIMEOUT, show_default=True,
              help='Connect and read timeout in seconds')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--quiet', is_flag=True, help='Suppress logging except errors')
def cli(arguments, timeout, debug, quiet):
    """Probe a Redis server once: METRIC_STATE HOST PORT PASSWORD

    Prints `id|value|` metric lines on stdout. Exit codes: 0 probe completed
    (server down is reported as Status 0), 1 unexpected error, 2 invalid
    authentication, 3 wrong number of parameters, 26 unknown host.
    """

    # Set up logging
    if debug:
        setup_logging(logging.DEBUG)
    elif quiet:
        setup_logging(logging.ERROR)
    else:
        setup_logging(logging.INFO)

    try:
        request = build_request(arguments, timeout=timeout)
        outcome = RedisProber(timeout=request.timeout).probe(request)
        emit(build_samples(outcome, request))

    except ProbeError as e:
        click.echo(str(e))
        sys.exit(e.exit_code)

    except Exception as e:
        click.echo(str(e))
        sys.exit(FailureKind.UNCAUGHT.exit_code)

    sys.exit(0)


if __name__ == '__main__':
    cli()
