import logging
from datetime import datetime, time, timezone
from typing import Iterable, List, Optional

from pydantic import model_validator

from reservation_engine.core.config import Settings, settings as default_settings
from reservation_engine.schemas.common import FieldError, ValidationResult
from reservation_engine.schemas.reservation import Reservation, ReservationStatus

logger = logging.getLogger(__name__)

LIFECYCLE_INCONSISTENCY = "lifecycle_inconsistency"
EXPIRY_IN_PAST = "expiry_in_past"


def required_lifecycle_field(status: ReservationStatus) -> Optional[str]:
    """The date field a reservation must carry while in `status`, if any."""
    match ReservationStatus(status):
        case ReservationStatus.PAID:
            return "date_paid"
        case ReservationStatus.CANCELLED:
            return "date_cancelled"
        case ReservationStatus.REFUNDED:
            return "date_refunded"
        case ReservationStatus.EXPIRED:
            return "date_expired"
        case ReservationStatus.RESERVED:
            return None


def _as_utc(value: datetime) -> datetime:
    # naive values are UTC on the wire
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _expiry_has_passed(expires_at: datetime, now: datetime) -> bool:
    expiry_day = _as_utc(expires_at).date()
    end_of_day = datetime.combine(expiry_day, time.max, tzinfo=timezone.utc)
    return _as_utc(now) >= end_of_day


def validate_reservation(
    reservation: Reservation,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> ValidationResult:
    """
    Check a reservation's lifecycle dates against its status.

    A status listed in required_lifecycle_field needs its date set; a missing
    one is reported against that field's wire name with the message
    "Required for <status> reservations.". Unpaid reservations also may not
    carry an expires_at whose (UTC) day has already ended, unless
    ENFORCE_RESERVATION_EXPIRY is switched off.

    Nothing is raised: problems come back as FieldErrors so the form can show
    them next to the offending input.
    """
    settings = settings or default_settings
    errors: List[FieldError] = []
    status = ReservationStatus(reservation.status)

    field = required_lifecycle_field(status)
    if field is not None and getattr(reservation, field) is None:
        errors.append(
            FieldError(
                field=Reservation.wire_name(field),
                message=f"Required for {status.value.lower()} reservations.",
                code=LIFECYCLE_INCONSISTENCY,
            )
        )

    if (
        settings.ENFORCE_RESERVATION_EXPIRY
        and status == ReservationStatus.RESERVED
        and reservation.expires_at is not None
        and _expiry_has_passed(reservation.expires_at, now or datetime.now(timezone.utc))
    ):
        errors.append(
            FieldError(
                field=Reservation.wire_name("expires_at"),
                message="Expiry date cannot be in the past.",
                code=EXPIRY_IN_PAST,
            )
        )

    if errors:
        logger.debug(
            "Reservation %s failed lifecycle validation: %s",
            reservation.id, [e.field for e in errors],
        )
    return ValidationResult(is_valid=not errors, errors=errors)


def validate_reservations(
    reservations: Iterable[Reservation],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> List[ValidationResult]:
    return [validate_reservation(r, now=now, settings=settings) for r in reservations]


# Reservation that refuses to be built with inconsistent lifecycle dates.
# Used for payloads about to be submitted.
class ValidatedReservation(Reservation):

    @model_validator(mode="after")
    def check_lifecycle(self):
        result = validate_reservation(self)
        if not result.is_valid:
            raise ValueError(
                "; ".join(f"{e.field}: {e.message}" for e in result.errors)
            )
        return self
