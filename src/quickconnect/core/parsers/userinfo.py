# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

import re

from ...models import UserInfo
from .common import BaseParser

# Username up to the first colon, password is everything after it
USER_INFO_RE = re.compile(r"(?P<username>[^:]*):?(?P<password>.*)", re.DOTALL)


class UserInfoParser(BaseParser):
    """
    Parses the ``user[:password]`` component of a connection URI.
    """

    def parse(self) -> UserInfo:
        """
        Parse the user-info component.

        Returns:
            The decoded username and password. Either is ``None`` when it is
            missing or decodes to an empty string.
        Raises:
            DecodingError: If either part contains a malformed escape.
        """
        match = USER_INFO_RE.fullmatch(self.raw)
        username = self.percent_decode(match.group("username"))
        password = self.percent_decode(match.group("password"))
        return UserInfo(username=username or None, password=password or None)


def parse_user_info(user_info: str) -> UserInfo:
    """Decode ``user_info`` into a username and password."""
    return UserInfoParser(user_info).parse()
