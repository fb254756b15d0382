import enum
from typing import Annotated, Any, Literal, Optional, Union
from decimal import Decimal

from pydantic import Field, field_validator

from reservation_engine.schemas.common import EngineModel
from reservation_engine.schemas.seat import Seat, SeatBase
from reservation_engine.schemas.showing import Showing


class SeatMapStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    SOLD = "SOLD"


# --- Reference-or-expansion variants ---
# A relation arrives either as a bare id or as the embedded document.
# Both are normalised into a tagged variant when the record is parsed.

class IdReference(EngineModel):
    kind: Literal["id"] = "id"
    id: str


class ExpandedSeat(EngineModel):
    kind: Literal["expanded"] = "expanded"
    value: Seat

    @property
    def id(self) -> str:
        return self.value.id


class ExpandedShowing(EngineModel):
    kind: Literal["expanded"] = "expanded"
    value: Showing

    @property
    def id(self) -> str:
        return self.value.id


SeatReference = Annotated[Union[IdReference, ExpandedSeat], Field(discriminator="kind")]
ShowingReference = Annotated[Union[IdReference, ExpandedShowing], Field(discriminator="kind")]


def _wrap_reference(value: Any) -> Any:
    if isinstance(value, (IdReference, ExpandedSeat, ExpandedShowing)):
        return value
    if isinstance(value, str):
        return {"kind": "id", "id": value}
    if isinstance(value, dict) and "kind" in value:
        return value
    return {"kind": "expanded", "value": value}


# Seat map: sale state of one seat for one showing
class SeatMapRecord(EngineModel):
    id: str = Field(alias="_id")
    seat: SeatReference
    showing: ShowingReference
    price: Annotated[Decimal, Field(gt=0)]
    status: SeatMapStatus = SeatMapStatus.AVAILABLE

    @field_validator("seat", "showing", mode="before")
    @classmethod
    def wrap_reference(cls, v):
        return _wrap_reference(v)

    @property
    def is_available(self) -> bool:
        return self.status == SeatMapStatus.AVAILABLE

    @property
    def is_reserved(self) -> bool:
        return self.status in (SeatMapStatus.RESERVED, SeatMapStatus.SOLD)

    @property
    def seat_id(self) -> str:
        return self.seat.id

    @property
    def showing_id(self) -> str:
        return self.showing.id

    @property
    def expanded_seat(self) -> Optional[SeatBase]:
        if self.seat.kind == "expanded":
            return self.seat.value
        return None
