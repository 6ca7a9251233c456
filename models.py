from typing import Annotated

from pydantic import AfterValidator, AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

# Zero value for a timestamp the client did not send
ZERO_DATETIME = "0001-01-01T00:00:00Z"

_aware_datetime = TypeAdapter(AwareDatetime)


def _validate_timestamp(value: str) -> str:
    """Reject anything that is not an ISO-8601 date-time with an offset.

    The text is kept as sent, so sub-microsecond fractions survive a round-trip.
    """
    try:
        _aware_datetime.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"invalid date-time {value!r}: {e.errors()[0]['msg']}") from None
    return value


Timestamp = Annotated[str, AfterValidator(_validate_timestamp)]


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    vrm: str = ""
    country: str = ""
    make: str = ""


class Driver(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    first_name: str = ""
    last_name: str = ""
    address_1: str = ""
    address_2: str = ""
    post_code: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    phone: str = ""
    email: str = ""


class Transaction(BaseModel):
    """A stored transaction: vehicle, driver and payment details keyed by id."""

    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)

    id: str = Field(..., description="Unique transaction identifier")
    location_datetime: Timestamp = Field(default=ZERO_DATETIME, description="When the transaction took place")
    location: str = ""
    total_amount: float = Field(default=0.0, description="Amount charged")
    currency: str = Field(default="", description="ISO 4217 currency code")
    vehicle: Vehicle = Field(default_factory=Vehicle)
    driver: Driver = Field(default_factory=Driver)


class StatusResponse(BaseModel):
    status: str = "Success"
