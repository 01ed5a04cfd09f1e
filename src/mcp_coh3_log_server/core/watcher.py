"""Reparse-and-merge driver for a live game log.

A watchdog observer reports changes to the log file; one worker thread
re-reads and re-parses the whole file on each change and merges the result
into a shared LogfileState. Readers take snapshot copies.

Notifications are coalesced: while a reparse runs, further notifications
collapse into a single follow-up pass, so merges always happen in
notification order.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from .formats import LineParser
from .log_service import parse_logfile_path
from .models import LogfileState

logger = logging.getLogger(__name__)


def _normalize(path: str | bytes | Path) -> str:
    return os.path.normcase(os.path.abspath(os.fsdecode(path)))


class LogfileEventHandler(FileSystemEventHandler):
    """Forward modify/create/move events for one file to a callback."""

    def __init__(self, log_path: Path, on_change: Callable[[], None]) -> None:
        super().__init__()
        self._target = _normalize(log_path)
        self._on_change = on_change

    def _matches(self, path: str | bytes) -> bool:
        return bool(path) and _normalize(path) == self._target

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._matches(event.src_path):
            self._on_change()

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._matches(event.src_path):
            self._on_change()

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._matches(event.dest_path):
            self._on_change()


class LogfileWatcher:
    """Own the shared LogfileState for one log file and keep it current.

    Example:
        >>> with LogfileWatcher(Path("warnings.log")) as watcher:
        ...     state = watcher.snapshot()
    """

    def __init__(
        self,
        log_path: str | Path,
        *,
        parser: LineParser | None = None,
        encoding: str = "utf-8",
        observer_factory: Callable[[], BaseObserver] = Observer,
    ) -> None:
        self.log_path = Path(log_path)
        self.parser = parser
        self.encoding = encoding
        self._observer_factory = observer_factory

        self._state = LogfileState()
        # Guards _state; held only while merging or copying.
        self._state_lock = threading.Lock()
        # Serializes read+parse+merge so at most one reparse is in flight.
        self._reparse_lock = threading.Lock()

        self._dirty = threading.Event()
        self._stopping = threading.Event()
        self.reloaded = threading.Event()

        self._worker: threading.Thread | None = None
        self._observer: BaseObserver | None = None

    def __enter__(self) -> LogfileWatcher:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @property
    def running(self) -> bool:
        return self._worker is not None and self._worker.is_alive()

    def notify(self) -> None:
        """Signal that the file changed. Safe to call from any thread."""
        self._dirty.set()

    def snapshot(self) -> LogfileState:
        """Return a copy of the current merged state."""
        with self._state_lock:
            return self._state.copy()

    def reload(self) -> bool:
        """Re-read and re-parse the whole file, then merge the result.

        Returns False when the file could not be read; the shared state is
        left untouched in that case.
        """
        with self._reparse_lock:
            try:
                fresh = parse_logfile_path(self.log_path, parser=self.parser, encoding=self.encoding)
            except FileNotFoundError:
                logger.warning("Log file not found: %s", self.log_path)
                return False
            except OSError as exc:
                logger.warning("Could not read %s: %s", self.log_path, exc)
                return False

            with self._state_lock:
                self._state.merge(fresh)

        self.reloaded.set()
        return True

    def start(self, *, watch: bool = True) -> None:
        """Start the worker thread (and the file observer when ``watch``).

        An initial pass runs immediately.
        """
        if self.running:
            return

        self._stopping.clear()
        self._dirty.set()
        self._worker = threading.Thread(target=self._run, name="logfile-watcher", daemon=True)
        self._worker.start()

        if watch:
            self._start_observer()

    def stop(self, timeout: float | None = 5.0) -> None:
        """Stop the observer and the worker thread."""
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout)
            self._observer = None

        self._stopping.set()
        self._dirty.set()
        if self._worker is not None:
            self._worker.join(timeout)
            self._worker = None

    def _start_observer(self) -> None:
        directory = self.log_path.parent
        if not directory.is_dir():
            logger.warning("Not watching %s: directory %s does not exist", self.log_path, directory)
            return

        handler = LogfileEventHandler(self.log_path, self.notify)
        observer = self._observer_factory()
        observer.schedule(handler, str(directory), recursive=False)
        observer.start()
        self._observer = observer
        logger.info("Watching %s", self.log_path)

    def _run(self) -> None:
        while True:
            self._dirty.wait()
            if self._stopping.is_set():
                return
            self._dirty.clear()
            try:
                self.reload()
            except Exception:
                # Keep serving the last merged state; the next change retries.
                logger.exception("Reparse of %s failed", self.log_path)
