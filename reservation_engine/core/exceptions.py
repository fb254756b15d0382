"""Exceptions raised by the engine.

Only caller bugs (precondition violations) are raised. User-correctable
problems such as a missing lifecycle date or a bad seat selection are
returned inside ValidationResult / SelectionResult instead.
"""


class ReservationEngineError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PreconditionViolation(ReservationEngineError):
    pass


class InvalidSeatCoordinateError(PreconditionViolation):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"Seat coordinates must be positive, got ({x}, {y}).")


class DuplicateSeatCoordinateError(PreconditionViolation):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"More than one seat occupies ({x}, {y}).")


class UnresolvedReferenceError(PreconditionViolation):
    def __init__(self, kind: str, ref_id: str):
        self.kind = kind
        self.ref_id = ref_id
        super().__init__(f"{kind} reference {ref_id!r} does not resolve.")
