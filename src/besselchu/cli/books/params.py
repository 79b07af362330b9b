"""Immutable parameter dataclasses for bestseller commands."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BestsellerListParams:
    """Parameters for listing today's bestsellers."""

    refresh: bool

    @classmethod
    def from_cli(cls, refresh: bool = False, **kwargs) -> "BestsellerListParams":
        return cls(refresh=refresh)
