# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

from typing import List

from pydantic import Field

from .base import BaseConfig


class ParameterSettings(BaseConfig):
    """Settings restricting which query-supplied parameters are accepted."""

    allowed: List[str] = Field(
        default_factory=list,
        description="If non-empty, only these query parameters are copied into a configuration.",
    )
    denied: List[str] = Field(
        default_factory=list,
        description="Query parameters that are always dropped.",
    )

    def permits(self, name: str) -> bool:
        """Return True if a query parameter called ``name`` may be used."""
        if self.allowed and name not in self.allowed:
            return False
        return name not in self.denied
