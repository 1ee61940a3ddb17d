"""Customer directory entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:

    id: str
    name: str
