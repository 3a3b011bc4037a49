from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..core.constants import DEFAULT_MAX_PENDING_UPDATES
from ..core.exceptions import StorageFailure, StoreBusy
from .model import PauseDocument

logger = logging.getLogger(__name__)


class JsonPauseSession:
    """One exclusive session on a JsonPauseStore, as yielded by `exclusive()`."""

    def __init__(self, store: "JsonPauseStore", document: PauseDocument):
        self._store = store
        self.document = document
        self.closed = False

    def commit(self, document: PauseDocument) -> None:
        try:
            self._store.commit(document)
        finally:
            self.closed = True


class JsonPauseStore:
    """Pause document persisted as a single JSON file.

    - The file is read on first use; a missing or unparsable file yields an
      empty document.
    - Updates are serialized by one lock over the whole document. At most
      `max_pending` callers may hold or wait for it; the next one gets StoreBusy.
    - Commits write a temp file in the same directory and `os.replace` it, so
      the file on disk is always either the old or the new document.
    - Readers get the last committed snapshot without taking the lock.
    """

    def __init__(self, path: Path | str, *, max_pending: int = DEFAULT_MAX_PENDING_UPDATES):
        if max_pending < 1:
            raise ValueError("max_pending must be >= 1")
        self._path = Path(path)
        self._max_pending = int(max_pending)

        self._session_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._snapshot: Optional[PauseDocument] = None
        self._pending = 0
        self._owner: Optional[int] = None

    @property
    def path(self) -> Path:
        return self._path

    # ---- exclusive session ----

    def load_for_update(self) -> PauseDocument:
        with self._state_lock:
            if self._pending >= self._max_pending:
                raise StoreBusy(f"{self._pending} updates already pending on {self._path}")
            self._pending += 1

        self._session_lock.acquire()
        self._owner = threading.get_ident()
        try:
            return self._current()
        except BaseException:
            self._release()
            raise

    def commit(self, document: PauseDocument) -> None:
        self._check_owner()
        try:
            self._write(document)
            with self._state_lock:
                self._snapshot = document
        finally:
            self._release()

    def abort(self) -> None:
        self._check_owner()
        self._release()

    @contextmanager
    def exclusive(self) -> Iterator[JsonPauseSession]:
        session = JsonPauseSession(self, self.load_for_update())
        try:
            yield session
        finally:
            if not session.closed:
                self.abort()

    # ---- readers ----

    def read_only(self) -> PauseDocument:
        return self._current()

    def initialize(self) -> bool:
        """Write an empty document if no file exists yet. Returns True when created."""
        with self.exclusive() as session:
            if self._path.exists():
                return False
            session.commit(session.document)
            return True

    # ---- internals ----

    def _current(self) -> PauseDocument:
        with self._state_lock:
            if self._snapshot is None:
                self._snapshot = self._read()
            return self._snapshot

    def _read(self) -> PauseDocument:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No pause document at %s, starting empty", self._path)
            return PauseDocument.empty()
        except OSError as e:
            raise StorageFailure(f"Cannot read pause document {self._path}: {e}") from e

        try:
            return PauseDocument.from_dict(json.loads(text or "{}"))
        except (ValueError, TypeError, KeyError) as e:
            logger.warning("Unreadable pause document at %s (%s), starting empty", self._path, e)
            return PauseDocument.empty()

    def _write(self, document: PauseDocument) -> None:
        payload = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)

        tmp_name: Optional[str] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            logger.error("Commit to %s failed: %s", self._path, e)
            raise StorageFailure(f"Cannot write pause document {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_name)

    def _check_owner(self) -> None:
        if self._owner != threading.get_ident():
            raise RuntimeError("No exclusive session held by this thread")

    def _release(self) -> None:
        self._owner = None
        with self._state_lock:
            self._pending -= 1
        self._session_lock.release()
