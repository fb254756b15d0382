from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Base for every engine schema: snake_case attributes, camelCase on the wire
class EngineModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# Field-addressable error: path is the wire (camelCase) field name
class FieldError(EngineModel):
    field: str
    message: str
    code: str


class ValidationResult(EngineModel):
    is_valid: bool
    errors: List[FieldError] = []

    def error_for(self, field: str) -> Optional[FieldError]:
        for error in self.errors:
            if error.field == field:
                return error
        return None


# Error responses
class ErrorResponse(EngineModel):
    error: str
    message: str


class InvalidSelectionError(ErrorResponse):
    invalid_ids: List[str]


class SelectionCountMismatchError(ErrorResponse):
    expected: int
    selected: int
