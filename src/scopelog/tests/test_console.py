"""Tests for the built-in console backend."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from scopelog import Logger, LogLevel, default_logger
from scopelog.config import get_settings
from scopelog.console import Console, ConsoleLogConfig, console_log_factory, make_console_log_factory


class RecordingConsole:
    """Console stand-in recording (channel, template, args)."""
    
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
    
    def __getattr__(self, channel: str) -> Any:
        return lambda template, *args: self.calls.append((channel, template, args))


@pytest.fixture(autouse=True)
def debug_off(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SCOPELOG_DEBUG", raising=False)


# ═════════════════════════════════════════════════════════════════════════════
# Formatting
# ═════════════════════════════════════════════════════════════════════════════


def test_default_config_format_call() -> None:
    console = RecordingConsole()
    make_console_log_factory(console=console)({})(LogLevel.INFO, "Hello world!")  # type: ignore[arg-type]
    assert console.calls == [("info", "%s: %s (%O)", ("INFO", "Hello world!", {}))]


def test_default_config_values() -> None:
    cfg = ConsoleLogConfig()
    assert cfg.format == "%s: %s (%O)"
    assert cfg.format_parameters(LogLevel.WARNING, "msg", {"a": 1}) == ["WARNING", "msg", {"a": 1}]


def test_custom_config() -> None:
    console = RecordingConsole()
    cfg = ConsoleLogConfig(format="[%s] %s", format_parameters=lambda level, message, scope: [scope["id"], message])
    log = Logger(make_console_log_factory(cfg, console=console), {"id": "req-1"})  # type: ignore[arg-type]
    log.error("failed")
    assert console.calls == [("error", "[%s] %s", ("req-1", "failed"))]


def test_meta_not_forwarded() -> None:
    console = RecordingConsole()
    Logger(make_console_log_factory(console=console)).info("msg", {"secret": 1})  # type: ignore[arg-type]
    assert console.calls == [("info", "%s: %s (%O)", ("INFO", "msg", {}))]


def test_invalid_config_rejected() -> None:
    with pytest.raises(ValidationError):
        ConsoleLogConfig(format=123)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        ConsoleLogConfig(format_parameters="not callable")  # type: ignore[arg-type]


def test_config_is_frozen() -> None:
    with pytest.raises(ValidationError):
        ConsoleLogConfig().format = "%s"  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Channels & Debug Switch
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("method", "channel"),
    [("error", "error"), ("warn", "warn"), ("info", "info")],
)
def test_channel_selection(method: str, channel: str) -> None:
    console = RecordingConsole()
    getattr(Logger(make_console_log_factory(console=console)), method)("msg")  # type: ignore[arg-type]
    assert [c[0] for c in console.calls] == [channel]


def test_debug_dropped_without_flag() -> None:
    console = RecordingConsole()
    Logger(make_console_log_factory(console=console)).debug("verbose")  # type: ignore[arg-type]
    assert console.calls == []


@pytest.mark.parametrize("value", ["1", "0", ""])
def test_debug_forwarded_to_log_channel_with_flag(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("SCOPELOG_DEBUG", value)
    console = RecordingConsole()
    Logger(make_console_log_factory(console=console)).debug("verbose")  # type: ignore[arg-type]
    assert console.calls == [("log", "%s: %s (%O)", ("DEBUG", "verbose", {}))]


def test_debug_flag_read_per_call(monkeypatch: pytest.MonkeyPatch) -> None:
    console = RecordingConsole()
    log = Logger(make_console_log_factory(console=console))  # type: ignore[arg-type]
    log.debug("dropped")
    monkeypatch.setenv("SCOPELOG_DEBUG", "1")
    log.debug("kept")
    assert [c[2][1] for c in console.calls] == ["kept"]


def test_settings_presence_semantics(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_settings().debug_enabled is False
    monkeypatch.setenv("SCOPELOG_DEBUG", "")
    assert get_settings().debug_enabled is True


# ═════════════════════════════════════════════════════════════════════════════
# Output Streams
# ═════════════════════════════════════════════════════════════════════════════


def test_console_streams(capsys: pytest.CaptureFixture[str]) -> None:
    console = Console()
    console.info("%s!", "info")
    console.log("log")
    console.warn("%s!", "warn")
    console.error("error")
    captured = capsys.readouterr()
    assert captured.out == "info!\nlog\n"
    assert captured.err == "warn!\nerror\n"


def test_console_log_factory_output(capsys: pytest.CaptureFixture[str]) -> None:
    Logger(console_log_factory, {}).info("Starting worker cluster...")
    assert capsys.readouterr().out == "INFO: Starting worker cluster... ({})\n"


def test_scope_rendered(capsys: pytest.CaptureFixture[str]) -> None:
    Logger(console_log_factory).scope({"worker_id": "w1"}).warn("slow")
    assert capsys.readouterr().err == "WARNING: slow ({'worker_id': 'w1'})\n"


# ═════════════════════════════════════════════════════════════════════════════
# Default Logger
# ═════════════════════════════════════════════════════════════════════════════


def test_default_logger_scope_round_trip() -> None:
    assert default_logger.get_current_scope() == {}
    scope = {"request_id": "abc", "nested": {"x": 1}}
    assert default_logger.scope(scope).get_current_scope() == scope


def test_default_logger_uses_console_factory(capsys: pytest.CaptureFixture[str]) -> None:
    assert default_logger.factory is console_log_factory
    default_logger.info("Hello world!")
    default_logger.debug("hidden")
    assert capsys.readouterr().out == "INFO: Hello world! ({})\n"


def test_json_template_keeps_unencodable_scope(capsys: pytest.CaptureFixture[str]) -> None:
    cfg = ConsoleLogConfig(format="%s %j", format_parameters=lambda level, message, scope: [message, scope])
    Logger(make_console_log_factory(cfg), {"job_id": 2**70}).info("hi")
    assert capsys.readouterr().out == "hi {'job_id': 1180591620717411303424}\n"
