"""Exception types for nlsplit."""


class NlsplitError(Exception):
    """Base class for all nlsplit errors."""


class UnknownTerminatorError(NlsplitError, ValueError):
    """Raised when a terminator name or preset is not in the catalog.

    Attributes:
        name: The name that could not be resolved
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown line terminator: {name!r}")


class InvalidTerminatorError(NlsplitError, ValueError):
    """Raised when a string or character is not a recognized terminator sequence.

    Attributes:
        value: The string or character that was provided
    """

    def __init__(self, value: str) -> None:
        self.value = value
        if len(value) == 1:
            message = f"{value!r} is not a newline character"
        else:
            message = f"{value!r} is not a newline sequence"
        super().__init__(message)
