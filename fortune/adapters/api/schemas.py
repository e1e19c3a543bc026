"""Wire schemas for the fortune API.

Maps core domain models to and from the JSON bodies exchanged with the
service. Field names on the wire are snake_case and match the model
attribute names. All models run in strict mode, so a wrong JSON type is
rejected instead of coerced.
"""

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from fortune.core.errors import RequestSerializationFailure, ResponseDecodeFailure
from fortune.core.models import CalendarDate, FortuneRequest, Prefecture, is_valid_date


class YearMonthDaySchema(BaseModel):
    model_config = ConfigDict(strict=True)

    year: int
    month: int
    day: int


class MonthDaySchema(BaseModel):
    """A recurring month/day, e.g. a prefecture's citizen day."""

    model_config = ConfigDict(strict=True)

    month: int
    day: int

    @model_validator(mode="after")
    def check_calendar(self) -> "MonthDaySchema":
        """Reject month/day pairs that never occur, such as 2/30."""
        if not is_valid_date(self.month, self.day):
            raise ValueError(f"{self.month}/{self.day} is not a valid month/day")
        return self


class FortuneRequestSchema(BaseModel):
    """Request body for POST /my_fortune."""

    model_config = ConfigDict(strict=True)

    name: str
    birthday: YearMonthDaySchema
    blood_type: str
    today: YearMonthDaySchema

    @field_validator("blood_type")
    @classmethod
    def lowercase_blood_type(cls, v: str) -> str:
        """The API only accepts lowercase blood types."""
        return v.lower()


class PrefectureSchema(BaseModel):
    """Success response body for POST /my_fortune."""

    model_config = ConfigDict(strict=True)

    name: str
    capital: str
    citizen_day: MonthDaySchema | None = None
    has_coast_line: bool
    logo_url: str
    brief: str

    def to_domain(self) -> Prefecture:
        citizen_day = None
        if self.citizen_day is not None:
            citizen_day = CalendarDate(month=self.citizen_day.month, day=self.citizen_day.day)
        return Prefecture(
            name=self.name,
            capital=self.capital,
            citizen_day=citizen_day,
            has_coast_line=self.has_coast_line,
            logo_url=self.logo_url,
            brief=self.brief,
        )


def _year_month_day(value: CalendarDate) -> YearMonthDaySchema:
    return YearMonthDaySchema(year=value.year, month=value.month, day=value.day)


def encode_request(request: FortuneRequest) -> bytes:
    """Serialize a FortuneRequest to the JSON request body.

    Raises:
        RequestSerializationFailure: If a field cannot be represented on
            the wire (e.g. a missing year or a non-integer date part).
    """
    try:
        schema = FortuneRequestSchema(
            name=request.name,
            birthday=_year_month_day(request.birthday),
            blood_type=request.blood_type,
            today=_year_month_day(request.today),
        )
    except ValidationError as e:
        raise RequestSerializationFailure(e) from e
    return schema.model_dump_json().encode("utf-8")


def decode_prefecture(raw: bytes) -> Prefecture:
    """Decode a success response body into a Prefecture.

    A null or absent citizen_day decodes to None. Anything else that does
    not match the schema fails as a whole; no partial result is returned.

    Raises:
        ResponseDecodeFailure: Wrapping the underlying parser error.
    """
    try:
        return PrefectureSchema.model_validate_json(raw).to_domain()
    except ValueError as e:  # includes pydantic.ValidationError
        raise ResponseDecodeFailure(e) from e
