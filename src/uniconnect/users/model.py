from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Admin:
    admin_id: int
    name: str
    email: str
    password_hash: str
