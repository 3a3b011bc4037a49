from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from .model import PauseDocument


class PauseSession(Protocol):
    """Handle for one exclusive read-modify-write cycle."""

    document: PauseDocument

    def commit(self, document: PauseDocument) -> None:
        raise NotImplementedError


class PauseStore(Protocol):
    """Repository interface for the shared pause document.

    Note: One exclusive session at a time for the whole document (not per badge).
    `commit` and `abort` always end the session, including when commit fails.
    """

    def load_for_update(self) -> PauseDocument:
        raise NotImplementedError

    def commit(self, document: PauseDocument) -> None:
        raise NotImplementedError

    def abort(self) -> None:
        raise NotImplementedError

    def exclusive(self) -> AbstractContextManager[PauseSession]:
        raise NotImplementedError

    def read_only(self) -> PauseDocument:
        raise NotImplementedError
