# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import unquote_plus

from ...constants import URI_ENCODING
from ...exceptions import DecodingError

# A "%" that does not start a two-digit hex escape
MALFORMED_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class BaseParser(ABC):
    """Abstract base class for the URI component parsers."""

    def __init__(self, raw: str):
        self.raw = raw

    @abstractmethod
    def parse(self) -> Any:
        """Parse the raw component and return its decoded form."""
        raise NotImplementedError

    @staticmethod
    def percent_decode(value: str) -> str:
        """
        Decode a form-encoded URI component.

        ``+`` is turned into a space and ``%XX`` escapes are decoded as UTF-8.

        Raises:
            DecodingError: If an escape is malformed or the escaped bytes
                are not valid UTF-8.
        """
        bad = MALFORMED_ESCAPE_RE.search(value)
        if bad:
            raise DecodingError(
                f"Malformed percent-escape at index {bad.start()} in {value!r}"
            )
        try:
            return unquote_plus(value, encoding=URI_ENCODING, errors="strict")
        except (UnicodeDecodeError, LookupError) as exc:
            raise DecodingError(f"Unable to decode {value!r} as {URI_ENCODING}") from exc
