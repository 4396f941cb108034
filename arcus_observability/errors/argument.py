"""Invalid argument exception with the offending parameter name.

Raised by constructors and option setters when a required value is
missing, blank, or has a shape the logging pipeline cannot use.
"""


class ArgumentError(ValueError):
    """Raised when a caller passes an unusable argument.

    Attributes:
        argument: Name of the offending parameter.
        message: Human-readable error description.
    """

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message)
        self.argument = argument
        self.message = message


__all__ = ["ArgumentError"]
