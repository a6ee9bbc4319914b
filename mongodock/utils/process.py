"""Interruptible execution of a single long-running external command.

Used for live streams (``docker logs -f``) that only end when the process
exits on its own or when the operator presses Ctrl+C.
"""

import queue
import signal
import subprocess
import threading

from rich.markup import escape

from mongodock.ui.components import show_info
from mongodock.utils.error_handler import handle_error
from mongodock.utils.logger import log
from mongodock.utils.sanitize import format_command

# Runner states
IDLE = "idle"
RUNNING = "running"
COMPLETED = "completed"
INTERRUPTED = "interrupted"

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class InterruptibleProcess:
    """
    Run one command with inherited stdout/stderr until it exits or a signal arrives.

    Two one-shot sources race on a queue: a waiter thread posts COMPLETED when
    the child exits, and the signal handler posts INTERRUPTED. The first item
    taken decides the outcome. Signal handlers are only installed while
    ``run()`` is executing, so ``run()`` must be called from the main thread.

    Each instance runs exactly once.
    """

    def __init__(self, command, signals=DEFAULT_SIGNALS,
                 completed_message="Process ended on its own.",
                 interrupted_message="Stopped by operator request."):
        self.command = list(command)
        self.signals = tuple(signals)
        self.completed_message = completed_message
        self.interrupted_message = interrupted_message
        self.state = IDLE
        self.process = None
        self.start_error = None
        self.kill_error = None
        self._outcomes = queue.SimpleQueue()

    def _wait_for_exit(self):
        self.process.wait()
        self._outcomes.put(COMPLETED)

    def _on_signal(self, signum, frame):
        # SimpleQueue.put is safe to call from a signal handler
        self._outcomes.put(INTERRUPTED)

    def _install_handlers(self):
        previous = {}
        for sig in self.signals:
            previous[sig] = signal.signal(sig, self._on_signal)
        return previous

    def _restore_handlers(self, previous):
        for sig, handler in previous.items():
            # None means the handler was not installed from Python
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)

    def _kill(self):
        try:
            self.process.kill()
        except OSError as e:
            self.kill_error = e
            return False
        self.process.wait()
        return True

    def _start(self):
        log.step(f"Executing: {escape(format_command(self.command))}")
        try:
            self.process = subprocess.Popen(self.command)
        except FileNotFoundError as e:
            self.start_error = e
            handle_error("E1004", f"Command not found: {self.command[0]}")
        except PermissionError as e:
            self.start_error = e
            handle_error("E1001", f"Permission denied running: {self.command[0]}", details=str(e))
        except OSError as e:
            self.start_error = e
            handle_error("E1006", f"Failed to execute: {self.command[0]}", details=str(e))
        return self.process is not None

    def run(self):
        """
        Start the command and block until one completion source fires.

        Returns:
            str: Terminal state (COMPLETED or INTERRUPTED), or IDLE if the
            command could not be started
        """
        if self.state != IDLE or self.start_error is not None:
            raise RuntimeError("InterruptibleProcess instances can only run once")

        previous = self._install_handlers()
        try:
            if not self._start():
                return self.state

            self.state = RUNNING
            waiter = threading.Thread(target=self._wait_for_exit, daemon=True)
            waiter.start()

            outcome = self._outcomes.get()
            log.debug(f"Stream outcome: {outcome}")

            if outcome == INTERRUPTED:
                self.state = INTERRUPTED
                if self._kill():
                    show_info(self.interrupted_message)
                else:
                    handle_error(
                        "E1006",
                        f"Failed to stop process {self.process.pid}, cleanup may be incomplete.",
                        details=str(self.kill_error),
                    )
            else:
                self.state = COMPLETED
                show_info(self.completed_message)

            return self.state
        finally:
            self._restore_handlers(previous)
