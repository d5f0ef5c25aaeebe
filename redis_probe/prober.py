#!/usr/bin/env python3
"""
Redis Availability Prober
Connects to a Redis server, optionally authenticates, issues INFO and times it
"""

import logging
import sys
import time
from typing import Optional

import redis
from redis.backoff import NoBackoff
from redis.retry import Retry

from .classifier import classify_exception
from .exceptions import ProbeError
from .info_parser import parse_info
from .models import DEFAULT_TIMEOUT, ProbeOutcome, ProbeRequest


def setup_logging(level=logging.INFO):
    """Set up logging configuration to stderr only"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


logger = logging.getLogger(__name__)


def _raw_response(response, **options):
    return response


class RedisProber:
    """Single-shot availability probe for one Redis server"""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def connect(self, host: str, port: int, password: Optional[str] = None) -> redis.Redis:
        """
        Open a dedicated RESP2 connection and authenticate it

        With a password, AUTH is the first command sent on the new socket.
        Raises on any transport failure or rejected credential.
        """
        logger.debug(f"Connecting to {host}:{port} (timeout {self.timeout}s, "
                     f"auth={'yes' if password else 'no'})")
        # RESP3 would send HELLO before AUTH, which Redis rejects with NOAUTH
        client = redis.Redis(
            host=host,
            port=port,
            password=password or None,
            protocol=2,
            socket_connect_timeout=self.timeout,
            socket_timeout=self.timeout,
            decode_responses=True,
            single_connection_client=True,
            retry=Retry(NoBackoff(), 0),
        )
        # INFO must reach parse_info as the raw text blob
        client.set_response_callback("INFO", _raw_response)
        return client

    def query_info(self, client: redis.Redis) -> str:
        return client.execute_command("INFO")

    def probe(self, request: ProbeRequest) -> ProbeOutcome:
        """
        Run connect -> auth -> INFO against the target

        Args:
            request: Probe parameters

        Returns:
            ProbeOutcome carrying latency and INFO fields, or CONNECTION_FAILED

        Raises:
            ProbeError: authentication rejected, unknown host or unexpected error
        """
        target = f"{request.host}:{request.port}"
        client = None
        try:
            client = self.connect(request.host, request.port, request.password)

            started = time.perf_counter()
            blob = self.query_info(client)
            latency_ms = int(round((time.perf_counter() - started) * 1000))

            fields = parse_info(blob)
            logger.info(f"SUCCESS {target}: INFO in {latency_ms}ms, role={fields.get('role')}")
            return ProbeOutcome.succeeded(latency_ms, fields)

        except Exception as e:
            kind = classify_exception(e)
            if not kind.is_hard:
                logger.warning(f"DOWN {target}: {e}")
                return ProbeOutcome.failed(kind)
            logger.error(f"ERROR {target}: {kind.name} - {e}")
            raise ProbeError(kind, kind.message or str(e)) from e

        finally:
            if client is not None:
                self._disconnect(client)

    def _disconnect(self, client: redis.Redis) -> None:
        try:
            client.close()
        except redis.exceptions.RedisError as e:
            logger.debug(f"Error while closing connection: {e}")
