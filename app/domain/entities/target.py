"""Target selectors accepted by the token resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class UserTarget:
    user_id: str


@dataclass(frozen=True)
class TokensTarget:
    tokens: tuple[str, ...]


@dataclass(frozen=True)
class PlatformTarget:
    platform: str


@dataclass(frozen=True)
class AllDevicesTarget:
    pass


TargetSelector: TypeAlias = UserTarget | TokensTarget | PlatformTarget | AllDevicesTarget


__all__ = [
    "AllDevicesTarget",
    "PlatformTarget",
    "TargetSelector",
    "TokensTarget",
    "UserTarget",
]
