# SPDX-License-Identifier: MIT

from typing import Literal, Protocol, get_args

import pendulum

CalendarUnit = Literal["minute", "hour", "day", "week", "month", "year"]

CALENDAR_UNITS: tuple[str, ...] = get_args(CalendarUnit)


class CalendarArithmetic(Protocol):
    """
    Calendar operations the timeline engine relies on.

    Everything the layout code does with dates goes through this interface,
    so a different date library only needs a new implementation of it.
    """

    def start_of(
        self, value: pendulum.DateTime, unit: CalendarUnit
    ) -> pendulum.DateTime: ...

    def add(
        self, value: pendulum.DateTime, amount: int, unit: CalendarUnit
    ) -> pendulum.DateTime: ...

    def subtract(
        self, value: pendulum.DateTime, amount: int, unit: CalendarUnit
    ) -> pendulum.DateTime: ...

    def is_same(
        self, first: pendulum.DateTime, second: pendulum.DateTime, unit: CalendarUnit
    ) -> bool: ...

    def is_before(self, first: pendulum.DateTime, second: pendulum.DateTime) -> bool: ...

    def is_after(self, first: pendulum.DateTime, second: pendulum.DateTime) -> bool: ...

    def is_same_or_before(
        self, first: pendulum.DateTime, second: pendulum.DateTime
    ) -> bool: ...

    def is_same_or_after(
        self, first: pendulum.DateTime, second: pendulum.DateTime
    ) -> bool: ...

    def diff(
        self, later: pendulum.DateTime, earlier: pendulum.DateTime, unit: CalendarUnit
    ) -> int: ...


class PendulumCalendar:
    """CalendarArithmetic backed by pendulum. Weeks start on Monday."""

    def start_of(
        self, value: pendulum.DateTime, unit: CalendarUnit
    ) -> pendulum.DateTime:
        return value.start_of(unit)

    def add(
        self, value: pendulum.DateTime, amount: int, unit: CalendarUnit
    ) -> pendulum.DateTime:
        return value.add(**{f"{unit}s": amount})

    def subtract(
        self, value: pendulum.DateTime, amount: int, unit: CalendarUnit
    ) -> pendulum.DateTime:
        return value.subtract(**{f"{unit}s": amount})

    def is_same(
        self, first: pendulum.DateTime, second: pendulum.DateTime, unit: CalendarUnit
    ) -> bool:
        return first.start_of(unit) == second.start_of(unit)

    def is_before(self, first: pendulum.DateTime, second: pendulum.DateTime) -> bool:
        return first < second

    def is_after(self, first: pendulum.DateTime, second: pendulum.DateTime) -> bool:
        return first > second

    def is_same_or_before(
        self, first: pendulum.DateTime, second: pendulum.DateTime
    ) -> bool:
        return first <= second

    def is_same_or_after(
        self, first: pendulum.DateTime, second: pendulum.DateTime
    ) -> bool:
        return first >= second

    def diff(
        self, later: pendulum.DateTime, earlier: pendulum.DateTime, unit: CalendarUnit
    ) -> int:
        """
        Whole units between two instants, truncated toward zero.

        Negative when `later` is actually before `earlier`.
        """
        interval = earlier.diff(later, abs=False)
        if unit == "minute":
            return interval.in_minutes()
        if unit == "hour":
            return interval.in_hours()
        if unit == "day":
            return interval.in_days()
        if unit == "week":
            return interval.in_weeks()
        if unit == "month":
            return interval.in_months()
        return interval.in_years()


CALENDAR: CalendarArithmetic = PendulumCalendar()
