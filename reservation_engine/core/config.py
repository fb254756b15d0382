from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Seating & Reservation Engine"
    LOG_LEVEL: str = "INFO"

    # Reservation types that are sold without picking seats (general admission).
    # An empty selection is valid for these even when ticket_count > 0.
    SEATLESS_RESERVATION_TYPES: List[str] = ["GENERAL_ADMISSION"]

    # What build_grid does when two seats share the same (x, y):
    #   last_write_wins: keep the later seat, log a warning
    #   error: raise DuplicateSeatCoordinateError
    GRID_DUPLICATE_POLICY: Literal["last_write_wins", "error"] = "last_write_wins"

    # Reject unpaid reservations whose expires_at day is already over
    ENFORCE_RESERVATION_EXPIRY: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    def is_seatless(self, reservation_type: str) -> bool:
        return reservation_type in self.SEATLESS_RESERVATION_TYPES


settings = Settings()
