import enum
from typing import List, Optional, Union
from decimal import Decimal

from reservation_engine.schemas.common import (
    EngineModel,
    InvalidSelectionError,
    SelectionCountMismatchError,
)


class SelectionFailure(str, enum.Enum):
    INVALID_SELECTION = "INVALID_SELECTION"
    SELECTION_COUNT_MISMATCH = "SELECTION_COUNT_MISMATCH"


# Outcome of checking a seat selection against a seat map
class SelectionResult(EngineModel):
    is_valid: bool
    failure: Optional[SelectionFailure] = None
    message: Optional[str] = None
    selected_ids: List[str] = []
    invalid_ids: List[str] = []
    expected_count: int
    selected_count: int
    total_price: Decimal = Decimal("0")

    def to_error(self) -> Optional[Union[InvalidSelectionError, SelectionCountMismatchError]]:
        """Error payload for the UI, or None when the selection is valid."""
        if self.failure is SelectionFailure.INVALID_SELECTION:
            return InvalidSelectionError(
                error=self.failure.value,
                message=self.message or "",
                invalid_ids=self.invalid_ids,
            )
        if self.failure is SelectionFailure.SELECTION_COUNT_MISMATCH:
            return SelectionCountMismatchError(
                error=self.failure.value,
                message=self.message or "",
                expected=self.expected_count,
                selected=self.selected_count,
            )
        return None
