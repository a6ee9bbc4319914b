import signal
import subprocess
import sys

import pytest

from mongodock.utils.process import COMPLETED, IDLE, INTERRUPTED, InterruptibleProcess

# Child that interrupts its parent, then would keep running for a long time
INTERRUPT_PARENT = (
    "import os, signal, time;"
    "os.kill(os.getppid(), signal.SIGINT);"
    "time.sleep(30)"
)


def test_process_exiting_on_its_own_completes_without_kill(monkeypatch, capsys):
    kills = []
    monkeypatch.setattr(subprocess.Popen, "kill", lambda self: kills.append(self.pid))
    previous = signal.getsignal(signal.SIGINT)

    runner = InterruptibleProcess(
        [sys.executable, "-c", "print('streamed line')"],
        completed_message="Log stream ended because the container stopped.",
    )
    state = runner.run()

    assert state == COMPLETED
    assert runner.state == COMPLETED
    assert kills == []
    assert runner.process.returncode == 0
    assert signal.getsignal(signal.SIGINT) is previous
    assert "Log stream ended because the container stopped." in capsys.readouterr().out


def test_signal_before_exit_kills_process(capsys):
    previous_int = signal.getsignal(signal.SIGINT)
    previous_term = signal.getsignal(signal.SIGTERM)

    runner = InterruptibleProcess(
        [sys.executable, "-c", INTERRUPT_PARENT],
        interrupted_message="Log streaming stopped.",
    )
    state = runner.run()

    assert state == INTERRUPTED
    assert runner.kill_error is None
    assert runner.process.poll() is not None
    assert signal.getsignal(signal.SIGINT) is previous_int
    assert signal.getsignal(signal.SIGTERM) is previous_term
    assert "Log streaming stopped." in capsys.readouterr().out


def test_kill_failure_is_reported_but_outcome_stays_interrupted(monkeypatch, capsys):
    def failing_kill(self):
        raise PermissionError("operation not permitted")

    monkeypatch.setattr(subprocess.Popen, "kill", failing_kill)

    runner = InterruptibleProcess([sys.executable, "-c", INTERRUPT_PARENT])
    try:
        state = runner.run()
    finally:
        runner.process.terminate()
        runner.process.wait()

    assert state == INTERRUPTED
    assert isinstance(runner.kill_error, PermissionError)
    assert "cleanup may be incomplete" in capsys.readouterr().out


def test_missing_executable_never_enters_running(capsys):
    previous = signal.getsignal(signal.SIGINT)

    runner = InterruptibleProcess(["mongodock-no-such-binary-7c1d"])
    state = runner.run()

    assert state == IDLE
    assert runner.process is None
    assert isinstance(runner.start_error, FileNotFoundError)
    assert signal.getsignal(signal.SIGINT) is previous
    assert "Command not found" in capsys.readouterr().out


def test_runner_is_single_use():
    runner = InterruptibleProcess([sys.executable, "-c", "pass"])
    runner.run()

    with pytest.raises(RuntimeError, match="only run once"):
        runner.run()


def test_only_requested_signals_are_captured():
    previous = signal.getsignal(signal.SIGTERM)
    seen = {}

    class Probe(InterruptibleProcess):
        def _wait_for_exit(self):
            seen["sigterm"] = signal.getsignal(signal.SIGTERM)
            super()._wait_for_exit()

    Probe([sys.executable, "-c", "pass"], signals=(signal.SIGINT,)).run()

    assert seen["sigterm"] is previous
