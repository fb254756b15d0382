import enum
from typing import Annotated, Any, List, Literal, Optional, Union
from decimal import Decimal

from pydantic import Discriminator, Field, PositiveInt, StringConstraints, Tag, TypeAdapter, model_validator

from reservation_engine.schemas.common import EngineModel

RowLabel = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=10)]
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class LayoutType(str, enum.Enum):
    SEAT = "SEAT"
    AISLE = "AISLE"
    STAIR = "STAIR"


class SeatType(str, enum.Enum):
    REGULAR = "REGULAR"
    PREMIUM = "PREMIUM"
    VIP = "VIP"
    RECLINER = "RECLINER"
    ACCESSIBLE = "ACCESSIBLE"


# Fields that only a bookable SEAT may carry (snake_case and wire names)
SEAT_ONLY_FIELDS = (
    "seat_number", "seat_type", "seat_label", "is_available", "price_multiplier",
)
SEAT_ONLY_ALIASES = (
    "seatNumber", "seatType", "seatLabel", "isAvailable", "priceMultiplier",
)


# Seat: fields shared by every layout type
class SeatBase(EngineModel):
    id: str = Field(alias="_id")
    row: RowLabel
    x: PositiveInt
    y: PositiveInt
    theatre: Optional[str] = None
    screen: Optional[str] = None

    @property
    def is_bookable(self) -> bool:
        return False

    @property
    def display_label(self) -> str:
        return self.row


# Bookable seat (layoutType = SEAT)
class SeatingPosition(SeatBase):
    layout_type: Literal["SEAT"] = "SEAT"
    seat_number: PositiveInt
    seat_type: SeatType = SeatType.REGULAR
    seat_label: Optional[NonEmptyStr] = None
    is_available: bool = True
    price_multiplier: Annotated[Decimal, Field(ge=0)] = Decimal("1")

    @property
    def is_bookable(self) -> bool:
        return self.is_available

    @property
    def display_label(self) -> str:
        return self.seat_label or f"{self.row}{self.x}"


# Aisle / stair placeholders occupy a grid cell but are never sold
class PlaceholderBase(SeatBase):

    @model_validator(mode="before")
    @classmethod
    def reject_seat_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            carried = [
                key for key in SEAT_ONLY_FIELDS + SEAT_ONLY_ALIASES
                if data.get(key) is not None
            ]
            if carried:
                raise ValueError(
                    f"Layout entries that are not seats cannot carry: {', '.join(carried)}"
                )
        return data


class AislePosition(PlaceholderBase):
    layout_type: Literal["AISLE"] = "AISLE"


class StairPosition(PlaceholderBase):
    layout_type: Literal["STAIR"] = "STAIR"


def _layout_type_of(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        tag = value.get("layoutType", value.get("layout_type"))
    else:
        tag = getattr(value, "layout_type", None)
    if isinstance(tag, LayoutType):
        return tag.value
    return tag


# Any seat-layout entry, discriminated by layout type
Seat = Annotated[
    Union[
        Annotated[SeatingPosition, Tag("SEAT")],
        Annotated[AislePosition, Tag("AISLE")],
        Annotated[StairPosition, Tag("STAIR")],
    ],
    Discriminator(_layout_type_of),
]

_seat_adapter = TypeAdapter(Seat)
_seat_list_adapter = TypeAdapter(List[Seat])


def parse_seat(data: Any) -> SeatBase:
    """Validate a raw seat payload (camelCase or snake_case) into its layout model."""
    return _seat_adapter.validate_python(data)


def parse_seats(data: List[Any]) -> List[SeatBase]:
    return _seat_list_adapter.validate_python(data)
