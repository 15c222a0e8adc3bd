# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

"""Value types produced by the connection parser."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import ClientFault, QuickConnectError


@dataclass(frozen=True)
class Configuration:
    """
    A protocol identifier plus the named string parameters of a connection.

    The parameter mapping is wrapped in a read-only view, so a configuration
    cannot change once the parser has handed it out.
    """

    protocol: str
    parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return (
            self.protocol == other.protocol
            and dict(self.parameters) == dict(other.parameters)
        )

    def __hash__(self) -> int:
        return hash((self.protocol, tuple(self.parameters.items())))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of a parameter, or ``default`` if it is unset."""
        return self.parameters.get(name, default)

    def to_dict(self) -> dict:
        return {"protocol": self.protocol, "parameters": dict(self.parameters)}


@dataclass(frozen=True)
class UserInfo:
    """Decoded username and password from a URI's user-info component."""

    username: Optional[str] = None
    password: Optional[str] = None


class Fault(str, Enum):
    """Which side a parse failure is attributed to."""

    CLIENT = "client"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ParseOutcome:
    """
    Tagged result of parsing a URI.

    Exactly one of ``configuration`` and ``fault`` is set. ``error`` keeps
    the original exception so callers can still re-raise it with ``unwrap``.
    """

    configuration: Optional[Configuration] = None
    fault: Optional[Fault] = None
    message: str = ""
    error: Optional[QuickConnectError] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.fault is None

    @classmethod
    def success(cls, configuration: Configuration) -> "ParseOutcome":
        return cls(configuration=configuration)

    @classmethod
    def failure(cls, error: QuickConnectError) -> "ParseOutcome":
        fault = Fault.CLIENT if isinstance(error, ClientFault) else Fault.INTERNAL
        return cls(fault=fault, message=str(error), error=error)

    def unwrap(self) -> Configuration:
        """Return the configuration, or raise the error that prevented it."""
        if self.error is not None:
            raise self.error
        if self.configuration is None:
            raise ValueError("ParseOutcome holds neither a configuration nor an error")
        return self.configuration
