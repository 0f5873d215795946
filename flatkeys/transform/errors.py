"""Errors raised while flattening."""


class FlattenError(Exception):
    """Base class for flattening errors."""


class InvalidInputError(FlattenError):
    """Raised when a map or sequence was required but something else was given."""

    def __init__(
        self,
        value_type: str,
        message: str = "Not a valid input: map or sequence",
    ):
        self.value_type = value_type
        super().__init__(message)


class TextFormatError(FlattenError):
    """Raised when JSON text does not start with an object."""

    def __init__(self):
        super().__init__("Not a valid input, must be a map")
