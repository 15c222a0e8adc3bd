# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import ParameterSettings, Settings
from ..constants import (
    DEFAULT_URI_HOST,
    DEFAULT_URI_PROTOCOL,
    HOSTNAME_PARAM,
    PASSWORD_PARAM,
    PORT_PARAM,
    USERNAME_PARAM,
)
from ..exceptions import QuickConnectError
from ..models import Configuration, ParseOutcome
from .parsers.query import QueryStringParser
from .parsers.userinfo import UserInfoParser
from .uri import decompose_uri

logger = logging.getLogger(__name__)


class ConnectionParser:
    """
    Turns a connection URI into a protocol plus named parameters.

    The URI is decomposed, then each component is handed to its dedicated
    parser in the ``parsers`` subpackage. The parser holds no state between
    calls, so one instance can be shared freely.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the parser, optionally restricting query parameters."""
        self.parameter_settings: ParameterSettings = (
            settings.parameters if settings is not None else ParameterSettings()
        )

    def get_configuration(self, uri: Any) -> Configuration:
        """
        Parse a URI string into a Configuration.

        Args:
            uri: The string form of the URI to be parsed.

        Returns:
            A Configuration combining the parsed URI values with defaults for
            the protocol and hostname.

        Raises:
            InvalidUriSyntax: If ``uri`` is not a valid URI.
            DecodingError: If the query or user-info cannot be decoded.
        """
        components = decompose_uri(uri)

        protocol = components.scheme or DEFAULT_URI_PROTOCOL
        parameters: Dict[str, str] = {}

        if components.port > 0:
            parameters[PORT_PARAM] = str(components.port)

        parameters[HOSTNAME_PARAM] = components.host or DEFAULT_URI_HOST

        # Query parameters are applied after the positional fields and win
        if components.query:
            for name, value in QueryStringParser(components.query).parse().items():
                if not self.parameter_settings.permits(name):
                    logger.debug("Dropping query parameter '%s' not permitted by settings", name)
                    continue
                parameters[name] = value

        if components.user_info:
            user_info = UserInfoParser(components.user_info).parse()
            if user_info.username:
                parameters[USERNAME_PARAM] = user_info.username
            if user_info.password:
                parameters[PASSWORD_PARAM] = user_info.password

        config = Configuration(protocol=protocol, parameters=parameters)
        logger.debug(
            "Parsed %s configuration with parameters: %s",
            protocol,
            ", ".join(config.parameters),
        )
        return config

    def parse(self, uri: Any) -> ParseOutcome:
        """
        Parse a URI without raising for bad input.

        Returns:
            A ParseOutcome holding either the Configuration or the fault that
            prevented it.
        """
        try:
            return ParseOutcome.success(self.get_configuration(uri))
        except QuickConnectError as exc:
            logger.debug("Parsing connection URI failed: %s", exc)
            return ParseOutcome.failure(exc)
