"""Scheduling error taxonomy."""


class MalformedTimeError(ValueError):
    """Raised when a date or time-of-day value cannot be parsed."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f'Malformed {field}: {value!r}')


class EmptySessionWarning(UserWarning):
    """Issued when a session is classified without any time slots."""
