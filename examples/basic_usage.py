#!/usr/bin/env python3
"""
Basic usage example for redis-availability-probe as a library
"""

from redis_probe import RedisProber, build_request, build_samples, format_samples


def main():
    request = build_request(["1,1,1,1", "localhost", "", '""'], timeout=2.0)

    print(f"Probing {request.host}:{request.port}...")
    outcome = RedisProber(timeout=request.timeout).probe(request)

    if outcome.success:
        print(f"Up, INFO answered in {outcome.latency_ms}ms")
        print(f"Redis version: {outcome.fields.get('redis_version', 'unknown')}")
    else:
        print("Down")

    for line in format_samples(build_samples(outcome, request)):
        print(line)


if __name__ == "__main__":
    main()
