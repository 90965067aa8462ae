"""Diagnostic rendering of payloads in UnwrapFailure messages."""

from __future__ import annotations

import json
import logging

import pytest

from fallible import (
    Config,
    UnwrapFailure,
    configure,
    failure,
    get_config,
    success,
)
from fallible._format import REDACTED, describe

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("hoge", "hoge"),
        (3, "3"),
        (12345678901234567890, "12345678901234567890"),
        (True, "True"),
        (None, "None"),
    ],
)
def test_scalars_render_with_str(value, expected) -> None:
    assert describe(value) == expected


def test_json_containers_render_as_json() -> None:
    payload = {"hoge": "aaaa", "fuga": 5, "piyo": False, "puyo": ["a", "b", "c"]}
    assert describe(payload) == json.dumps(payload)
    assert describe([1, 2]) == "[1, 2]"


def test_non_json_containers_fall_back_to_repr() -> None:
    payload = {"when": object}
    assert describe(payload) == repr(payload)


def test_circular_containers_fall_back_to_repr() -> None:
    payload: list[object] = []
    payload.append(payload)
    assert describe(payload) == "[[...]]"


def test_exceptions_render_with_their_message() -> None:
    assert describe(ValueError("bad input")) == "bad input"


def test_long_payloads_are_truncated() -> None:
    text = describe("x" * 50, Config(diagnostic_max_length=10))
    assert text == "xxxxxxx..."
    assert len(text) == 10


def test_zero_length_disables_truncation() -> None:
    assert describe("x" * 500, Config(diagnostic_max_length=0)) == "x" * 500


def test_redaction_hides_payloads() -> None:
    assert describe("secret-token", Config(redact_payloads=True)) == REDACTED


def test_unwrap_diagnostics_follow_the_active_config() -> None:
    configure(Config(redact_payloads=True))

    with pytest.raises(UnwrapFailure) as exc:
        failure("api_key=abc123").unwrap()

    assert "abc123" not in str(exc.value)
    assert REDACTED in str(exc.value)


def test_expect_messages_are_never_rewritten() -> None:
    configure(Config(diagnostic_max_length=5, redact_payloads=True))

    with pytest.raises(UnwrapFailure) as exc:
        success(1).expect_failure("a caller supplied message")

    assert str(exc.value) == "a caller supplied message"


@pytest.mark.parametrize(("limit", "expected"), [(1, "a"), (2, "ab"), (3, "abc")])
def test_tiny_limits_never_exceed_the_limit(limit: int, expected: str) -> None:
    assert describe("abcdef", Config(diagnostic_max_length=limit)) == expected


def test_truncation_at_ellipsis_boundary() -> None:
    assert describe("abcdef", Config(diagnostic_max_length=4)) == "a..."


class _BrokenStr:
    def __str__(self) -> str:
        raise RuntimeError("str exploded")

    def __repr__(self) -> str:
        return "<_BrokenStr>"


class _BrokenEverything:
    def __str__(self) -> str:
        raise RuntimeError("str exploded")

    def __repr__(self) -> str:
        raise RuntimeError("repr exploded")


def test_failing_str_falls_back_to_repr() -> None:
    assert describe(_BrokenStr()) == "<_BrokenStr>"


def test_failing_str_and_repr_fall_back_to_object_repr() -> None:
    assert describe(_BrokenEverything()).startswith("<")


@pytest.mark.parametrize("payload", [_BrokenStr(), _BrokenEverything()])
def test_unwrap_raises_unwrap_failure_for_unprintable_payloads(payload) -> None:
    with pytest.raises(UnwrapFailure):
        failure(payload).unwrap()
    with pytest.raises(UnwrapFailure):
        success(payload).unwrap_error()


@pytest.mark.parametrize(
    ("name", "raw"),
    [
        ("FALLIBLE_DIAGNOSTIC_MAX_LENGTH", "lots"),
        ("FALLIBLE_DIAGNOSTIC_MAX_LENGTH", "-5"),
        ("FALLIBLE_REDACT_PAYLOADS", "maybe"),
    ],
)
def test_invalid_environment_still_raises_unwrap_failure(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    name: str,
    raw: str,
) -> None:
    monkeypatch.setenv(name, raw)
    caplog.set_level(logging.WARNING, logger="fallible")

    with pytest.raises(UnwrapFailure) as exc:
        failure("disk full").unwrap()
    with pytest.raises(UnwrapFailure):
        success(1).unwrap_error()

    assert "disk full" in str(exc.value)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert get_config() == Config()
