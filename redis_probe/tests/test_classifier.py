"""
Tests for failure classification
"""

import socket

import pytest
import redis

from redis_probe.classifier import classify_exception, is_authentication_failure, is_name_resolution_failure
from redis_probe.exceptions import FailureKind, ProbeError


def _chained(outer, inner):
    try:
        try:
            raise inner
        except Exception:
            raise outer
    except Exception as e:
        return e


class TestAuthenticationMatcher:
    @pytest.mark.parametrize("message", [
        "NOAUTH Authentication required.",
        "ERR invalid password",
        "WRONGPASS invalid username-password pair or user is disabled.",
        "ERR Client sent AUTH, but no password is set",
        "ERR AUTH <password> called without any password configured for the default user.",
    ])
    def test_markers(self, message):
        assert is_authentication_failure(redis.exceptions.ResponseError(message))

    def test_typed_auth_error(self):
        assert is_authentication_failure(redis.exceptions.AuthenticationError("denied"))

    def test_match_is_case_sensitive(self):
        assert not is_authentication_failure(redis.exceptions.ResponseError("noauth please"))

    def test_plain_connection_error(self):
        assert not is_authentication_failure(redis.exceptions.ConnectionError("Connection refused"))


class TestClassifyException:
    def test_auth_failure(self):
        exc = redis.exceptions.ResponseError("NOAUTH Authentication required.")
        assert classify_exception(exc) is FailureKind.INVALID_AUTHENTICATION

    def test_refused(self):
        exc = redis.exceptions.ConnectionError("Error 111 connecting to localhost:1. Connection refused.")
        assert classify_exception(exc) is FailureKind.CONNECTION_FAILED

    def test_timeout(self):
        assert classify_exception(redis.exceptions.TimeoutError("Timeout")) is FailureKind.CONNECTION_FAILED

    def test_os_error(self):
        assert classify_exception(ConnectionResetError()) is FailureKind.CONNECTION_FAILED

    def test_other_response_error(self):
        exc = redis.exceptions.ResponseError("ERR unknown command 'INFO'")
        assert classify_exception(exc) is FailureKind.CONNECTION_FAILED

    def test_name_resolution(self):
        exc = _chained(
            redis.exceptions.ConnectionError("Error -2 connecting to nohost:6379. Name or service not known."),
            socket.gaierror(-2, "Name or service not known"),
        )
        assert is_name_resolution_failure(exc)
        assert classify_exception(exc) is FailureKind.UNKNOWN_HOST

    def test_probe_error_keeps_kind(self):
        exc = ProbeError(FailureKind.INVALID_PARAMETERS_NUMBER)
        assert classify_exception(exc) is FailureKind.INVALID_PARAMETERS_NUMBER

    def test_unexpected(self):
        assert classify_exception(KeyError("boom")) is FailureKind.UNCAUGHT


class TestFailureKind:
    def test_exit_codes(self):
        assert FailureKind.CONNECTION_FAILED.exit_code == 0
        assert FailureKind.UNCAUGHT.exit_code == 1
        assert FailureKind.INVALID_AUTHENTICATION.exit_code == 2
        assert FailureKind.INVALID_PARAMETERS_NUMBER.exit_code == 3
        assert FailureKind.UNKNOWN_HOST.exit_code == 26

    def test_only_connection_failure_is_soft(self):
        hard = [kind for kind in FailureKind if kind.is_hard]
        assert FailureKind.CONNECTION_FAILED not in hard
        assert len(hard) == len(FailureKind) - 1
