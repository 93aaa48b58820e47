"""Exclusive write sections and background execution for generation runs."""

import concurrent.futures
import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_root_locks: dict[str, threading.RLock] = {}
_root_locks_guard = threading.Lock()


def _get_root_lock(key: str) -> threading.RLock:
    """Get or create the write lock of one project root."""
    with _root_locks_guard:
        if key not in _root_locks:
            _root_locks[key] = threading.RLock()
        return _root_locks[key]


class WriteSection:
    """Serializes all mutations of the same project tree.

    Usage:
        with WriteSection(project_root):
            ...  # create directories and files
    """

    def __init__(self, root: Path):
        self.key = str(Path(root).resolve())
        self._lock = _get_root_lock(self.key)

    def __enter__(self) -> "WriteSection":
        self._lock.acquire()
        logger.debug("Entered write section for %s", self.key)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._lock.release()
        logger.debug("Left write section for %s", self.key)


class BackgroundRunner:
    """Runs units of work on a single worker thread."""

    def __init__(self):
        self._executor = concurrent.futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix="mvp-creator")

    def submit(self, fn: Callable[[], Any]) -> concurrent.futures.Future:
        """Queue fn and return the future of its result."""
        return self._executor.submit(fn)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundRunner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
