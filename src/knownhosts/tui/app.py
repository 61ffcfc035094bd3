"""TUI application — message loop driving the interactive host browser."""

from __future__ import annotations

import logging
import os
import queue
import signal
import sys
import threading
import time
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from rich.console import Console
from rich.live import Live

from knownhosts.config import KnownHostsConfig
from knownhosts.errors import HostsFileError
from knownhosts.hosts import store
from knownhosts.tui.display import TuiDisplay
from knownhosts.tui.input import KeyboardInput
from knownhosts.tui.state import (
    Effect,
    HostsLoaded,
    HostsSaved,
    HostsState,
    IoFailed,
    KeyPress,
    LoadHosts,
    Message,
    Quit,
    SaveHosts,
    ScheduleTick,
    Tick,
    initial_effects,
    update,
)

logger = logging.getLogger(__name__)


def load_hosts(path: Path) -> Message:
    """Background task: read the hosts file into a HostsLoaded message."""
    try:
        lines = store.load(path)
    except HostsFileError as exc:
        return IoFailed(str(exc))
    return HostsLoaded(tuple(lines))


def save_hosts(path: Path, lines: tuple[str, ...]) -> Message:
    """Background task: persist *lines* and report the outcome."""
    try:
        store.save(path, lines)
    except HostsFileError as exc:
        logger.warning("Failed to save %s", path, exc_info=True)
        return IoFailed(str(exc))
    return HostsSaved(len(lines))


class TuiApp:
    """Interactive TUI for browsing and pruning known_hosts.

    Threading model:
    - Main thread: keyboard input, message dispatch and Rich Live rendering
    - One worker thread: load/save tasks, results posted back as messages
    - Timer thread: posts Tick messages at ``config.tick_interval``

    Only the main thread touches the state; everything else goes through
    the queue.
    """

    def __init__(self, config: KnownHostsConfig, path: Path) -> None:
        self._config = config
        self._path = path
        self._state = HostsState()
        self._queue: queue.Queue[Message] = queue.Queue()
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="knownhosts-io"
        )
        self._display = TuiDisplay()
        self._console = Console(stderr=True)
        self._timer: threading.Timer | None = None
        self._closed = False
        self.running = True

    @property
    def state(self) -> HostsState:
        return self._state

    def post(self, message: Message) -> None:
        """Queue a message for the main loop (safe from any thread)."""
        self._queue.put(message)

    def start(self) -> None:
        """Dispatch the startup effects: initial load and first tick."""
        self._run_effects(initial_effects())

    def drain(self) -> int:
        """Process every queued message. Returns how many were handled."""
        handled = 0
        while True:
            try:
                message = self._queue.get_nowait()
            except queue.Empty:
                return handled
            self.dispatch(message)
            handled += 1

    def dispatch(self, message: Message) -> None:
        """Run one message through the state machine and act on its effects."""
        self._state, effects = update(self._state, message)
        self._run_effects(effects)

    def close(self) -> None:
        """Stop the tick timer and wait for pending background tasks."""
        self._closed = True
        if self._timer is not None:
            self._timer.cancel()
        self._executor.shutdown(wait=True)

    def run(self) -> None:
        """Run the TUI main loop. Blocks until quit."""
        original_sigint = signal.getsignal(signal.SIGINT)
        original_sigterm = signal.getsignal(signal.SIGTERM)

        def _signal_handler(signum: int, frame: object) -> None:
            self.post(KeyPress("ctrl+c"))

        signal.signal(signal.SIGINT, _signal_handler)
        signal.signal(signal.SIGTERM, _signal_handler)

        try:
            self.start()
            with KeyboardInput() as kb:
                with Live(
                    console=self._console,
                    screen=True,
                    refresh_per_second=10,
                ) as live:
                    while self.running:
                        key = kb.read(timeout=0.05)
                        if key is not None:
                            self.post(KeyPress(key))
                        self.drain()

                        size = os.get_terminal_size(sys.stderr.fileno())
                        live.update(
                            self._display.render(
                                self._state, height=size.lines, width=size.columns
                            )
                        )
        finally:
            self.close()
            signal.signal(signal.SIGINT, original_sigint)
            signal.signal(signal.SIGTERM, original_sigterm)

    def _run_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, Quit):
                self.running = False
            elif self._closed:
                logger.debug("Dropping %r after close", effect)
            elif isinstance(effect, LoadHosts):
                self._submit(load_hosts, self._path)
            elif isinstance(effect, SaveHosts):
                self._submit(save_hosts, self._path, effect.lines)
            elif isinstance(effect, ScheduleTick):
                self._schedule_tick()
            else:
                raise TypeError(f"Unknown effect: {effect!r}")

    def _submit(self, fn: Callable[..., Message], *args: object) -> None:
        future = self._executor.submit(fn, *args)
        future.add_done_callback(self._on_task_done)

    def _on_task_done(self, future: Future[Message]) -> None:
        exc = future.exception()
        if exc is not None:
            logger.error("Background task failed", exc_info=exc)
            self.post(IoFailed(str(exc)))
            return
        self.post(future.result())

    def _schedule_tick(self) -> None:
        timer = threading.Timer(
            self._config.tick_interval, lambda: self.post(Tick(time.time()))
        )
        timer.daemon = True
        self._timer = timer
        timer.start()
