# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

"""Custom exception types for the QuickConnect package."""


class QuickConnectError(Exception):
    """Base exception class for all package-specific errors."""

    pass


class ClientFault(QuickConnectError):
    """Raised when the caller's input is at fault."""

    pass


class InternalFault(QuickConnectError):
    """Raised when the failure is on our side rather than the caller's."""

    pass


class InvalidUriSyntax(ClientFault):
    """Raised when a string cannot be parsed as a URI at all."""

    pass


class DecodingError(InternalFault):
    """Raised when percent-decoding a URI component fails."""

    pass
