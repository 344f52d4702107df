import pytest

from src.attendance_bot.attendance_bot.attendance.factory import LocationStrategyFactory
from src.attendance_bot.attendance_bot.attendance.strategies.checkin_strategy import CheckInStrategy
from src.attendance_bot.attendance_bot.attendance.strategies.checkout_strategy import CheckOutStrategy
from src.attendance_bot.attendance_bot.attendance.strategies.closed_day_strategy import ClosedDayStrategy
from src.attendance_bot.attendance_bot.core.enums import DayState, EventKind, EventStatus, Outcome


@pytest.mark.parametrize(
    "state,expected",
    [
        (DayState.NO_CHECK_IN, CheckInStrategy),
        (DayState.CHECKED_IN, CheckOutStrategy),
        (DayState.CHECKED_OUT, ClosedDayStrategy),
    ],
)
def test_factory_picks_strategy_for_day_state(state, expected):
    factory = LocationStrategyFactory()
    strategy = factory.for_state(state)

    assert isinstance(strategy, expected)


def test_check_in_outside_zone_persists_nothing():
    decision = CheckInStrategy().decide(inside=False)

    assert decision.kind is None
    assert decision.outcome == Outcome.CHECK_IN_OUT_OF_ZONE


def test_check_out_is_recorded_even_outside_zone():
    decision = CheckOutStrategy().decide(inside=False)

    assert decision.kind == EventKind.OUT
    assert decision.status == EventStatus.OUT_OF_ZONE


@pytest.mark.parametrize("inside", [True, False])
def test_closed_day_never_records(inside):
    decision = ClosedDayStrategy().decide(inside=inside)

    assert decision.kind is None
    assert decision.outcome == Outcome.ALREADY_COMPLETED
