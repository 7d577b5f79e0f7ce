from __future__ import annotations

import pytest

from kvmfish.errors import InvalidActionName, MalformedValue
from kvmfish.hardware.services.power import PowerState
from kvmfish.redfish.services.actions import (
    ALLOWED_RESET_TYPES,
    ActionDispatcher,
    ResetType,
    UnrecognizedReset,
    parse_reset_type,
)


def test_parse_reset_type():
    assert parse_reset_type("On") is ResetType.ON
    assert parse_reset_type("ForceRestart") is ResetType.FORCE_RESTART
    assert parse_reset_type("Sleep") == UnrecognizedReset("Sleep")
    assert parse_reset_type("on") == UnrecognizedReset("on")
    assert ALLOWED_RESET_TYPES == ["On", "ForceOff", "GracefulShutdown", "ForceRestart"]


def test_power_on_when_on_is_noop(board, led):
    led("0")
    res = ActionDispatcher(board.power).dispatch("On")
    assert res.noop
    assert res.observed is PowerState.ON
    assert board.driver.writes == []


def test_power_on_when_off_short_press(board, led):
    led("1")
    res = ActionDispatcher(board.power).dispatch(ResetType.ON)
    assert res.performed == "short_press"
    assert board.driver.holds == [(board.profile.power_line, 800)]
    assert board.driver.writes == [(board.profile.power_line, 1), (board.profile.power_line, 0)]


@pytest.mark.parametrize(
    "name,led_value,expected",
    [
        ("ForceOff", "0", ("long_press", 1000)),
        ("ForceOff", "1", None),
        ("GracefulShutdown", "0", ("short_press", 800)),
        ("GracefulShutdown", "1", None),
    ],
)
def test_state_guarded_transitions(board, led, name, led_value, expected):
    led(led_value)
    res = ActionDispatcher(board.power).dispatch(name)
    if expected is None:
        assert res.noop
        assert board.driver.holds == []
    else:
        assert res.performed == expected[0]
        assert board.driver.holds == [(board.profile.power_line, expected[1])]


@pytest.mark.parametrize("led_value", ["0", "1", "garbage"])
def test_force_restart_ignores_state(board, led, led_value):
    led(led_value)
    res = ActionDispatcher(board.power).dispatch("ForceRestart")
    assert res.observed is None
    assert res.performed == "reset"
    assert board.driver.holds == [(board.profile.reset_line, 800)]


def test_unrecognized_action_touches_nothing(board, led):
    led("1")
    with pytest.raises(InvalidActionName):
        ActionDispatcher(board.power).dispatch("Sleep")
    with pytest.raises(InvalidActionName):
        ActionDispatcher(board.power).dispatch(UnrecognizedReset("PushPowerButton"))
    assert board.driver.writes == []


def test_state_read_failure_is_not_guessed(board, led):
    led("xyz")
    with pytest.raises(MalformedValue):
        ActionDispatcher(board.power).dispatch("On")
    assert board.driver.writes == []
