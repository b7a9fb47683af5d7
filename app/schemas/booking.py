import datetime as dt
import math
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from app.core.exceptions import ValidationFailed
from app.models.enums import BookingStatus

# Upper bound of the 32-bit Integer id columns
MAX_ID = 2_147_483_647

# Field (alias or attribute name) -> (reported field, message)
FIELD_ERRORS = {
    "hallId": ("hallId", "Invalid hallId"),
    "hall_id": ("hallId", "Invalid hallId"),
    "date": ("date", "Invalid date"),
    "booking_date": ("date", "Invalid date"),
    "price": ("price", "Invalid price"),
    "timeSlot": ("timeSlot", "Invalid time slot"),
    "time_slot": ("timeSlot", "Invalid time slot"),
}


# ASCII decimal literal; rejects inf/nan spellings and non-ASCII digits
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _to_number(value):
    if value is None or isinstance(value, bool):
        raise ValueError("not a number")

    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str) and NUMBER_PATTERN.fullmatch(value.strip()):
        text = value.strip()
        number = int(text) if text.lstrip("+-").isdigit() else float(text)
    else:
        raise ValueError("not a number")

    try:
        finite = math.isfinite(number)
    except OverflowError:
        finite = False
    if not finite:
        raise ValueError("not a finite number")

    return number


class PricingRequest(BaseModel):
    """Body of ``POST /hallowner/pricing``; fields are checked in declaration order."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    hall_id: int = Field(alias="hallId")
    booking_date: dt.date = Field(alias="date")
    price: Optional[float] = None
    time_slot: str = Field(alias="timeSlot")

    @field_validator("hall_id", mode="before")
    @classmethod
    def parse_hall_id(cls, value):
        number = _to_number(value)
        if number != int(number) or not 0 < number <= MAX_ID:
            raise ValueError("hallId must be a positive integer")
        return int(number)

    @field_validator("booking_date", mode="before")
    @classmethod
    def parse_date(cls, value):
        if isinstance(value, (dt.date, dt.datetime)):
            return value.date() if isinstance(value, dt.datetime) else value
        if not isinstance(value, str) or not value.strip():
            raise ValueError("date must be an ISO-8601 string")

        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            return dt.datetime.fromisoformat(text).date()

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value):
        if value is None:
            return None
        return float(_to_number(value))

    @field_validator("time_slot", mode="before")
    @classmethod
    def check_time_slot(cls, value):
        if not isinstance(value, str):
            raise ValueError("timeSlot must be a string")
        return value

    @classmethod
    def parse(cls, payload) -> "PricingRequest":
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            errors = exc.errors()
            loc = errors[0]["loc"] if errors else ()
            field, message = FIELD_ERRORS.get(loc[0] if loc else None, (None, "Invalid request body"))
            raise ValidationFailed(message, field=field) from exc


class BookingOut(BaseModel):
    id: int
    hall_id: int
    user_id: int
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    status: BookingStatus
    plus_price: Optional[float] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}

    @field_serializer("start_time", "end_time")
    def format_time(self, value: dt.time):
        return value.strftime("%H:%M")


class PricingResponse(BaseModel):
    message: str
    created: bool
    booking: BookingOut
