from typing import Any


class MondoException(Exception):
    """Base exception for errors raised by Mondo itself.

    Errors raised by pymongo are never wrapped, they propagate unchanged.
    """
    def __init__(self, *args, value: Any = None):
        super().__init__(*args)

        self.value = value
        if value is not None:
            self.add_note(f" - Offending Value: {value!r}")


class InvalidOptionError(MondoException, ValueError):
    """Raised when an enumerated option (read concern, read preference) is given a name that isn't recognized."""
    def __init__(self, *args, option: str, value: Any = None):
        super().__init__(*args, value=value)
        self.option = option
