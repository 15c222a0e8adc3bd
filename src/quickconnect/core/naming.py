# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

from typing import Optional

from ..constants import HOSTNAME_PARAM, PORT_PARAM, USERNAME_PARAM
from ..models import Configuration


def get_name(config: Optional[Configuration]) -> Optional[str]:
    """
    Build a display name for a configuration.

    The name has the form ``protocol://username@hostname:port/`` where each
    part is left out when its source value is empty. The password and any
    other parameters never appear, and nothing is re-encoded, so the name is
    not guaranteed to parse back into the same configuration.

    Args:
        config: The configuration to name.

    Returns:
        The generated name, or None if ``config`` is None.
    """
    if config is None:
        return None

    protocol = config.protocol
    host = config.get(HOSTNAME_PARAM)
    port = config.get(PORT_PARAM)
    user = config.get(USERNAME_PARAM)

    parts = []
    if protocol:
        parts.append(f"{protocol}://")
    if user:
        parts.append(f"{user}@")
    if host:
        parts.append(host)
    if port:
        parts.append(f":{port}")
    parts.append("/")
    return "".join(parts)
