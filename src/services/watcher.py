"""
Re-analysis on save for Scratch project files.

ProjectFileHandler filters watchdog events down to project files and
debounces the burst of writes an editor makes on save. ProjectWatcher owns
the observer thread.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Optional, Set

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileModifiedEvent

logger = logging.getLogger(__name__)

PROJECT_SUFFIXES = {".json", ".sb2", ".sb"}


class ProjectFileHandler(FileSystemEventHandler):
    """Calls back with the path of each saved project file."""

    def __init__(
        self,
        callback: Callable[[Path], None],
        extensions: Set[str] = None,
        target: Optional[Path] = None,
        debounce_seconds: float = 1.0,
    ):
        """
        Args:
            callback: Receives the Path of the saved file
            extensions: Suffixes treated as project files (default: PROJECT_SUFFIXES)
            target: Report only this file, ignoring its siblings
            debounce_seconds: Window in which repeat saves of one file are dropped
        """
        self.callback = callback
        self.extensions = extensions or PROJECT_SUFFIXES
        self.target = target.resolve() if target else None
        self.debounce_seconds = debounce_seconds
        self.last_seen = {}

    def on_modified(self, event: FileModifiedEvent) -> None:
        if event.is_directory:
            return

        file_path = Path(event.src_path)

        if file_path.suffix not in self.extensions:
            return
        if self.target is not None and file_path.resolve() != self.target:
            return

        now = time.time()
        if now - self.last_seen.get(file_path, 0) < self.debounce_seconds:
            return
        self.last_seen[file_path] = now

        # Keep the observer thread alive when the callback fails
        try:
            self.callback(file_path)
        except Exception as e:
            logger.error(f"Error processing change to {file_path.name}: {e}")


class ProjectWatcher:
    """
    Runs a watchdog observer over one project file or a directory of them.

    Example:
        watcher = ProjectWatcher(service.analyze_file).watch(Path("game.sb2"))
        with watcher:
            ...
    """

    def __init__(self, callback: Callable[[Path], None]):
        self.callback = callback
        self.observer: Optional[Observer] = None
        self.handler: Optional[ProjectFileHandler] = None
        self.watch_path: Optional[Path] = None

    def watch(self, path: Path) -> "ProjectWatcher":
        """Select what to observe; a single file is observed via its directory."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Path does not exist: {path}")

        if path.is_file():
            self.watch_path = path.parent
            self.handler = ProjectFileHandler(self.callback, target=path)
        else:
            self.watch_path = path
            self.handler = ProjectFileHandler(self.callback)
        return self

    def start(self) -> None:
        if not self.watch_path:
            raise RuntimeError("Nothing to observe; call watch() before start()")

        if self.is_running():
            raise RuntimeError("Observer already started")

        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.watch_path), recursive=False)
        self.observer.start()
        logger.info(f"Observing {self.watch_path}")

    def stop(self) -> None:
        if self.is_running():
            self.observer.stop()
            self.observer.join()
            logger.info(f"Stopped observing {self.watch_path}")

    def is_running(self) -> bool:
        return self.observer is not None and self.observer.is_alive()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
