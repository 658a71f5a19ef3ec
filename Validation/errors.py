"""Error hierarchy raised by the hotel domain models."""


class HotelError(Exception):
    """Base exception for every hotel domain validation failure."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def with_context(self, context: str) -> "HotelError":
        '''Return an error of the same kind whose message starts with context.'''
        return type(self)(self.field, f"{context} {self.message}")


class MissingValueError(HotelError):
    """A required value was not supplied (None)."""


class InvalidValueError(HotelError):
    """A value was supplied but breaks a domain rule."""
