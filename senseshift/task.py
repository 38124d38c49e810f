"""Background tasks, and a task that ticks a component at a fixed rate."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskConfig:
    """How a task is to be started.

    ``stack_depth``, ``priority`` and ``core_id`` describe the task for the scheduler;
    threads here share one interpreter, so they are kept as information only.
    """

    name: str
    stack_depth: int = 4096
    priority: int = 1
    core_id: int | None = None


class Task(ABC):
    """A unit of work that runs ``run()`` on its own thread once begun."""

    def __init__(self, config: TaskConfig) -> None:
        self.config = config
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        logger.info("creating Task: %s", config.name)

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def stop_requested(self) -> bool:
        return self._stop_event.is_set()

    def begin(self) -> None:
        """Start the task's thread; a task can be begun only while it is not running."""
        if self.is_running:
            raise RuntimeError(f"task {self.config.name!r} is already running")
        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name=self.config.name, daemon=True)
        self._thread.start()
        logger.info("Created task %s", self.config.name)

    @abstractmethod
    def run(self) -> None:
        """The task's body."""

    def stop(self) -> None:
        """Ask the task to finish and wait for its thread."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()


class ComponentUpdateTask(Task):
    """Initialises a component, then calls its ``tick()`` every ``update_delay`` milliseconds."""

    def __init__(self, component: Any, update_delay: int, config: TaskConfig) -> None:
        super().__init__(config)
        self.component = component
        self.update_delay = update_delay
        logger.info("creating ComponentUpdateTask: %s", config.name)

    def begin(self) -> None:
        self.component.init()
        super().begin()

    def run(self) -> None:
        delay = self.update_delay / 1000.0
        while not self._stop_event.is_set():
            started = time.monotonic()
            self.component.tick()
            elapsed = time.monotonic() - started
            logger.debug("T: %.3fms, Ft: %dHz", elapsed * 1000.0, 1000 // max(self.update_delay, 1))
            if elapsed < delay:
                self._stop_event.wait(delay - elapsed)