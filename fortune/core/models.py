"""Domain models for the fortune lookup client.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .messages import Language, text

VALID_BLOOD_TYPES = frozenset({"a", "b", "ab", "o"})

# Used for month/day values without a year so that Feb 29 stays legal.
REFERENCE_LEAP_YEAR = 2000

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_ENGLISH_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year in the Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int | None = None) -> int:
    """Return the number of days in month.

    Args:
        month: Month number, 1 through 12.
        year: Calendar year. If None, the reference leap year is used.

    Raises:
        ValueError: If month is outside 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(REFERENCE_LEAP_YEAR if year is None else year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_date(month: int, day: int, year: int | None = None) -> bool:
    """Check that (year, month, day) names a real day.

    Out-of-range days are rejected, never rolled over into the next month.
    """
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return False
    return day <= days_in_month(month, year)


@dataclass(frozen=True)
class CalendarDate:
    """A calendar day, or a recurring month/day when year is None."""

    month: int
    day: int
    year: int | None = None

    @classmethod
    def today(cls) -> "CalendarDate":
        """Build a date for the current local day."""
        return cls.from_date(date.today())

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def is_valid(self) -> bool:
        return is_valid_date(self.month, self.day, self.year)

    def is_after(self, other: "CalendarDate") -> bool:
        """Compare year, then month, then day.

        Raises:
            ValueError: If either date has no year.
        """
        if self.year is None or other.year is None:
            raise ValueError("cannot order dates without a year")
        return (self.year, self.month, self.day) > (other.year, other.month, other.day)

    def formatted(self, language: Language = "ja") -> str:
        """Render the date for display, e.g. "5月9日" or "May 9"."""
        if language == "en":
            month_name = (
                _ENGLISH_MONTHS[self.month - 1]
                if 1 <= self.month <= 12
                else str(self.month)
            )
            if self.year is None:
                return f"{month_name} {self.day}"
            return f"{month_name} {self.day}, {self.year}"
        if self.year is None:
            return f"{self.month}月{self.day}日"
        return f"{self.year}年{self.month}月{self.day}日"


class ValidationIssue(Enum):
    """The first check a FortuneRequest failed, in evaluation order."""

    EMPTY_NAME = "empty_name"
    INVALID_BLOOD_TYPE = "invalid_blood_type"
    INVALID_BIRTHDAY = "invalid_birthday"
    INVALID_TODAY = "invalid_today"
    BIRTHDAY_IN_FUTURE = "birthday_in_future"

    @property
    def reason(self) -> str:
        return _ISSUE_REASONS[self]


_ISSUE_REASONS = {
    ValidationIssue.EMPTY_NAME: "name must not be empty",
    ValidationIssue.INVALID_BLOOD_TYPE: "blood type must be one of a, b, ab, o",
    ValidationIssue.INVALID_BIRTHDAY: "birthday is not a valid calendar date",
    ValidationIssue.INVALID_TODAY: "today is not a valid calendar date",
    ValidationIssue.BIRTHDAY_IN_FUTURE: "birthday must not be after today",
}


@dataclass(frozen=True)
class FortuneRequest:
    """Inputs for one fortune lookup.

    Built once per invocation and never mutated. Validation is a pure
    check over the fields; construction itself does not reject anything
    so that the caller can learn which check failed.
    """

    name: str
    birthday: CalendarDate
    blood_type: str
    today: CalendarDate

    def validate(self) -> ValidationIssue | None:
        """Return the first failing check, or None if the request is valid.

        Checks run in order: name, blood type, birthday, today, and
        finally that the birthday is not after today. Equal dates pass.
        """
        if not self.name:
            return ValidationIssue.EMPTY_NAME
        if not isinstance(self.blood_type, str) or (
            self.blood_type.lower() not in VALID_BLOOD_TYPES
        ):
            return ValidationIssue.INVALID_BLOOD_TYPE
        if self.birthday.year is None or not self.birthday.is_valid():
            return ValidationIssue.INVALID_BIRTHDAY
        if self.today.year is None or not self.today.is_valid():
            return ValidationIssue.INVALID_TODAY
        if self.birthday.is_after(self.today):
            return ValidationIssue.BIRTHDAY_IN_FUTURE
        return None

    @property
    def is_valid(self) -> bool:
        return self.validate() is None


@dataclass(frozen=True)
class Prefecture:
    """A prefecture returned by the fortune service."""

    name: str
    capital: str
    citizen_day: CalendarDate | None  # not every prefecture has one
    has_coast_line: bool
    logo_url: str
    brief: str

    def __post_init__(self) -> None:
        """Validate the civic day on creation."""
        if self.citizen_day is not None:
            if self.citizen_day.year is not None:
                raise ValueError("citizen_day must not carry a year")
            if not self.citizen_day.is_valid():
                raise ValueError(
                    f"citizen_day {self.citizen_day.month}/{self.citizen_day.day} "
                    "is not a valid month/day"
                )

    def citizen_day_text(self, language: Language = "ja") -> str:
        if self.citizen_day is None:
            return text("citizen_day_none", language)
        return self.citizen_day.formatted(language)

    def coast_line_text(self, language: Language = "ja") -> str:
        return text("coast_yes" if self.has_coast_line else "coast_no", language)
