# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

"""Core URI parsing and naming functions."""
from __future__ import annotations

from typing import Any

from ..models import Configuration, ParseOutcome
from .connection_parser import ConnectionParser
from .naming import get_name
from .uri import UriComponents, decompose_uri

_default_parser = ConnectionParser()


def get_configuration(uri: Any) -> Configuration:
    """Parse ``uri`` with default settings; see ConnectionParser.get_configuration."""
    return _default_parser.get_configuration(uri)


def parse(uri: Any) -> ParseOutcome:
    """Parse ``uri`` with default settings, returning a tagged outcome."""
    return _default_parser.parse(uri)


__all__ = [
    "ConnectionParser",
    "UriComponents",
    "decompose_uri",
    "get_configuration",
    "get_name",
    "parse",
]
