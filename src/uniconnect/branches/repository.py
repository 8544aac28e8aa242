from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Branch, BranchYear


class BranchRepository(Protocol):
    """Repository interface for Branch.

    Services depend on this protocol, not on a concrete database.
    """

    def list_all(self) -> Sequence[Branch]:
        raise NotImplementedError

    def get_by_id(self, branch_id: int) -> Optional[Branch]:
        raise NotImplementedError

    def get_by_name(self, branch_name: str) -> Optional[Branch]:
        raise NotImplementedError

    def create(self, *, branch_name: str, years: Sequence[BranchYear]) -> int:
        raise NotImplementedError

    def delete_by_id(self, branch_id: int) -> bool:
        raise NotImplementedError
