# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

import logging
from typing import Dict

from .common import BaseParser

logger = logging.getLogger(__name__)


class QueryStringParser(BaseParser):
    """
    Parses the query component of a connection URI into parameters.
    """

    def parse(self) -> Dict[str, str]:
        """
        Split the query on ``&`` and each segment on its first ``=``.

        A segment without ``=`` maps its key to an empty string, empty
        segments are skipped, and later duplicate keys overwrite earlier ones.

        Returns:
            The decoded parameters, in the order they first appeared.
        Raises:
            DecodingError: If a key or value contains a malformed escape.
        """
        parameters: Dict[str, str] = {}
        for segment in self.raw.split("&"):
            if not segment:
                continue
            key, sep, value = segment.partition("=")
            if not sep:
                logger.debug("Query segment '%s' has no value; using ''", key)
            parameters[self.percent_decode(key)] = self.percent_decode(value)
        return parameters


def parse_query_string(query: str) -> Dict[str, str]:
    """Decode ``query`` into a mapping of parameter names to values."""
    return QueryStringParser(query).parse()
