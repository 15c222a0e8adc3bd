# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

"""Parsers for the individual components of a connection URI.

Each module provides a ``BaseParser`` subclass whose ``parse`` method
percent-decodes one raw URI component, plus a module-level shortcut
function wrapping it.
"""
from __future__ import annotations

from .common import BaseParser
from .query import QueryStringParser, parse_query_string
from .userinfo import UserInfoParser, parse_user_info

__all__ = [
    "BaseParser",
    "QueryStringParser",
    "UserInfoParser",
    "parse_query_string",
    "parse_user_info",
]
