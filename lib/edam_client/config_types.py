from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    url: str
    token: str | None = None
    timeout_s: float = 15.0
