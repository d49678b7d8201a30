"""Exceptions raised by taskrecur."""


class RecurrenceError(Exception):
    """Base class for recurrence errors."""


class InvalidPatternError(RecurrenceError, ValueError):
    """A recurrence rule failed validation.

    Attributes:
        errors: Human-readable validation messages
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid recurrence pattern: " + "; ".join(self.errors))


class UnknownPresetError(RecurrenceError, KeyError):
    """No preset exists with the requested id."""

    def __init__(self, preset_id: str):
        self.preset_id = preset_id
        super().__init__(preset_id)

    def __str__(self) -> str:
        return f"Unknown preset: {self.preset_id}"
