import enum
from typing import Annotated, List, Optional
from decimal import Decimal
from datetime import datetime

from pydantic import Field, PositiveInt, StringConstraints, field_validator

from reservation_engine.schemas.common import EngineModel


class ReservationStatus(str, enum.Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"
    EXPIRED = "EXPIRED"


# Known reservation types. The field itself stays an opaque string; which
# types skip seat selection is configured in Settings.SEATLESS_RESERVATION_TYPES.
class ReservationType(str, enum.Enum):
    GENERAL_ADMISSION = "GENERAL_ADMISSION"
    RESERVED_SEATS = "RESERVED_SEATS"


LIFECYCLE_DATE_FIELDS = ("date_paid", "date_cancelled", "date_refunded", "date_expired")


# Reservation: as built by the checkout form or returned by the API.
# Lifecycle consistency is checked separately (utils.lifecycle).
class Reservation(EngineModel):
    id: Optional[str] = Field(default=None, alias="_id")
    user: Optional[str] = None
    showing: Optional[str] = None
    status: ReservationStatus = ReservationStatus.RESERVED
    reservation_type: str
    ticket_count: PositiveInt
    selected_seating: List[str] = []
    price_paid: Optional[Annotated[Decimal, Field(ge=0)]] = None
    currency: Optional[str] = None
    date_reserved: Optional[datetime] = None
    date_paid: Optional[datetime] = None
    date_cancelled: Optional[datetime] = None
    date_refunded: Optional[datetime] = None
    date_expired: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    notes: Optional[Annotated[str, StringConstraints(min_length=1, max_length=3000)]] = None

    @field_validator("selected_seating", mode="before")
    @classmethod
    def parse_null_seating(cls, v):
        if v is None:
            return []
        return v

    @field_validator(*LIFECYCLE_DATE_FIELDS, "expires_at", "notes", mode="before")
    @classmethod
    def parse_empty_str_to_none(cls, v):
        if v == "":
            return None
        return v

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        return cls.model_fields[field_name].alias or field_name
