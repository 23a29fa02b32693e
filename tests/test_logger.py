import pytest

from appimagelib import logger as log
from appimagelib.logger import LogLevel, Logger


@pytest.fixture
def restore_callback():
    shared = log.get_logger()
    saved = shared._callback
    yield shared
    shared.set_callback(saved)


def test_get_logger_is_shared_by_module_helpers(restore_callback):
    received = []
    log.get_logger().set_callback(lambda lvl, msg: received.append((lvl, msg)))
    log.info("shared")
    assert received == [(LogLevel.INFO, "shared")]


@pytest.mark.parametrize(
    "raw, level",
    [
        (0, LogLevel.DEBUG),
        (1, LogLevel.INFO),
        (2, LogLevel.WARNING),
        (3, LogLevel.ERROR),
    ],
)
def test_integer_levels_map_in_order(raw, level):
    instance = Logger()
    levels = []
    instance.set_callback(lambda lvl, msg: levels.append(lvl))
    instance.log(raw, "x")
    assert levels == [level]


@pytest.mark.parametrize(
    "func, level",
    [
        (log.debug, LogLevel.DEBUG),
        (log.info, LogLevel.INFO),
        (log.warning, LogLevel.WARNING),
        (log.error, LogLevel.ERROR),
    ],
)
def test_module_helpers_use_callback(restore_callback, func, level):
    received = []
    log.set_logger_callback(lambda lvl, msg: received.append((lvl, msg)))
    func("hello")
    assert received == [(level, "hello")]


def test_default_output_goes_to_stderr(capsys):
    Logger().log(LogLevel.ERROR, "boom")
    captured = capsys.readouterr()
    assert captured.err == "ERROR: boom\n"
    assert captured.out == ""


def test_default_prefix_per_level(capsys):
    instance = Logger()
    instance.log(LogLevel.INFO, "a")
    instance.log(LogLevel.DEBUG, "b")
    instance.log(LogLevel.WARNING, "c")
    assert capsys.readouterr().err.splitlines() == ["INFO: a", "DEBUG: b", "WARNING: c"]


def test_instance_callback_replaced():
    instance = Logger()
    messages = []
    instance.set_callback(lambda lvl, msg: messages.append(msg))
    instance.log(LogLevel.INFO, "first")
    instance.set_callback(lambda lvl, msg: None)
    instance.log(LogLevel.INFO, "second")
    assert messages == ["first"]


def test_log_accepts_integer_level():
    instance = Logger()
    levels = []
    instance.set_callback(lambda lvl, msg: levels.append(lvl))
    instance.log(2, "x")
    assert levels == [LogLevel.WARNING]