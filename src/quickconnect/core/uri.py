# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

"""Syntactic decomposition of URI strings.

The grammar below follows RFC 3986, widened with the RFC 3987 ``ucschar``
range so that non-ASCII hosts and credentials are accepted. Components are
returned raw; percent-decoding is left to the parsers in ``core.parsers``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import InvalidUriSyntax

logger = logging.getLogger(__name__)

_UCSCHAR = "\xa0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef\U00010000-\U000EFFFD"
_UNRESERVED = rf"[A-Za-z0-9\-._~{_UCSCHAR}]"
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"
_SUB_DELIMS = r"[!$&'()*+,;=]"
_PCHAR = rf"(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|[:@])"

# RFC 3986, appendix B
URI_SPLIT_RE = re.compile(
    r"^(?:(?P<scheme>[^:/?#]+):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?$",
    re.DOTALL,
)

SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*$")
PATH_RE = re.compile(rf"^(?:{_PCHAR}|/)*$")
QUERY_RE = re.compile(rf"^(?:{_PCHAR}|[/?])*$")

# Server-based authority: [ userinfo "@" ] host [ ":" port ]
SERVER_AUTHORITY_RE = re.compile(
    rf"^(?:(?P<userinfo>(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|:)*)@)?"
    rf"(?P<host>\[[0-9A-Za-z:.\-_~!$&'()*+,;=]+\]|(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS})*)"
    r"(?::(?P<port>[0-9]*))?$"
)

# Anything else that is still legal in an authority is registry-based
REGISTRY_AUTHORITY_RE = re.compile(
    rf"^(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|[:@])*$"
)


@dataclass(frozen=True)
class UriComponents:
    """The raw components of a URI; absent parts are ``None``, an absent port is -1."""

    scheme: Optional[str] = None
    user_info: Optional[str] = None
    host: Optional[str] = None
    port: int = -1
    query: Optional[str] = None


def decompose_uri(uri: Any) -> UriComponents:
    """
    Split a URI string into scheme, user-info, host, port and query.

    Args:
        uri: The URI string to decompose.

    Returns:
        The raw components of the URI.

    Raises:
        InvalidUriSyntax: If ``uri`` is not a string or is not a valid
            URI reference.
    """
    if not isinstance(uri, str):
        raise InvalidUriSyntax(f"Invalid URI Syntax: expected a string, got {type(uri).__name__}")

    match = URI_SPLIT_RE.match(uri)
    if match is None:  # pragma: no cover - appendix B matches every string
        raise InvalidUriSyntax(f"Invalid URI Syntax: {uri!r}")

    scheme = match.group("scheme")
    authority = match.group("authority")
    path = match.group("path")
    query = match.group("query")
    fragment = match.group("fragment")

    if scheme is not None and not SCHEME_RE.match(scheme):
        raise InvalidUriSyntax(f"Invalid URI Syntax: illegal scheme in {uri!r}")
    if not PATH_RE.match(path):
        raise InvalidUriSyntax(f"Invalid URI Syntax: illegal character in path of {uri!r}")
    if query is not None and not QUERY_RE.match(query):
        raise InvalidUriSyntax(f"Invalid URI Syntax: illegal character in query of {uri!r}")
    if fragment is not None and not QUERY_RE.match(fragment):
        raise InvalidUriSyntax(f"Invalid URI Syntax: illegal character in fragment of {uri!r}")

    user_info = host = None
    port = -1
    if authority is not None:
        server = SERVER_AUTHORITY_RE.match(authority)
        if server is not None:
            user_info = server.group("userinfo")
            host = server.group("host")
            if server.group("port"):
                port = int(server.group("port"))
        elif REGISTRY_AUTHORITY_RE.match(authority):
            logger.debug("Authority '%s' is not server-based; host left unset", authority)
        else:
            raise InvalidUriSyntax(f"Invalid URI Syntax: illegal character in authority of {uri!r}")

    components = UriComponents(
        scheme=scheme,
        user_info=user_info,
        host=host,
        port=port,
        query=query,
    )
    logger.debug(
        "Decomposed URI: scheme=%s host=%s port=%d query=%s",
        scheme,
        host,
        port,
        query,
    )
    return components
