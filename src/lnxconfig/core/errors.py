from __future__ import annotations

from pathlib import Path


class LnxError(Exception):
    """Base error for lnxconfig exceptions."""


class SettingsError(LnxError):
    """Raised when a parser settings file is invalid."""


class ConfigReadError(LnxError):
    """Raised when an lnx source cannot be opened or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class LnxParseError(LnxError):
    """Fatal error tied to one line of an lnx file."""

    def __init__(self, lineno: int, reason: str, line: str = "") -> None:
        self.lineno = lineno
        self.reason = reason
        self.line = line
        super().__init__(f"line {lineno}: {reason}")


class DirectiveSyntaxError(LnxParseError):
    """Wrong field count, missing keyword or unknown sub-directive."""


class InvalidAddressError(LnxParseError):
    """Address field is not a dotted-decimal IPv4 literal."""


class InvalidNumberError(LnxParseError):
    """Numeric field is not an unsigned decimal in range."""


class InvalidEnumError(LnxParseError):
    """Routing mode literal is not recognized."""


class FieldError(LnxError):
    """Raised by field decoders; the classifier attaches the line number."""

    error_class: type[LnxParseError] = DirectiveSyntaxError

    def at_line(self, lineno: int, line: str) -> LnxParseError:
        return self.error_class(lineno, str(self), line)


class FieldSyntaxError(FieldError):
    error_class = DirectiveSyntaxError


class FieldAddressError(FieldError):
    error_class = InvalidAddressError


class FieldNumberError(FieldError):
    error_class = InvalidNumberError


class FieldEnumError(FieldError):
    error_class = InvalidEnumError
