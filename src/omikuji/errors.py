"""Exceptions raised by the omikuji package."""


class OmikujiError(Exception):
    """Base class for omikuji errors."""


class NotJanuaryFirstError(OmikujiError):
    """Raised when a fortune is drawn outside January 1st without --force."""

    def __init__(self, message: str = ""):
        super().__init__(
            message
            or "This command can only be executed on January 1st.\n"
            "Use --force to override."
        )
