import re
import subprocess

import pytest

import mongodock.utils.error_handler as error_handler_module
import mongodock.utils.shell as shell_module
from mongodock.config import Settings


class FakeDocker:
    """Stands in for subprocess.run and answers like the docker CLI would."""

    def __init__(self, running=False, exists=None, returncodes=None, stdout=None, stderr=None, others=()):
        self.running = running
        self.exists = running if exists is None else exists
        self.returncodes = returncodes or {}
        self.stdout = stdout or {}
        self.stderr = stderr or {}
        # Names of unrelated containers, matched against the name filter as a regex
        self.others = list(others)
        self.calls = []
        self.envs = []

    def _ps(self, command):
        present = self.exists if "-a" in command else self.running
        ids = ["4f2a9c1e0b7d"] if present else []
        pattern = next(arg[len("name="):] for arg in command if arg.startswith("name="))
        ids.extend(f"0ther{i:07d}" for i, name in enumerate(self.others) if re.search(pattern, name))
        return "".join(f"{container_id}\n" for container_id in ids)

    def __call__(self, command, capture_output=False, text=True, check=False, env=None):
        command = list(command)
        self.calls.append(command)
        self.envs.append(env)

        subcommand = command[1]
        if subcommand == "ps":
            out = self._ps(command)
        else:
            out = self.stdout.get(subcommand, "")
        err = self.stderr.get(subcommand, "")
        returncode = self.returncodes.get(subcommand, 0)

        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, command, output=out, stderr=err)

        return subprocess.CompletedProcess(
            command,
            returncode,
            stdout=out if capture_output else None,
            stderr=err if capture_output else None,
        )

    @property
    def subcommands(self):
        return [call[1] for call in self.calls]

    def calls_for(self, subcommand):
        return [call for call in self.calls if call[1] == subcommand]


class ScriptedInput:
    """Replays operator answers for text_input prompts."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, message, default="", password=False):
        self.prompts.append((message, password))
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def isolated_error_log(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(error_handler_module, "LOG_DIR", log_dir)
    return log_dir


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_docker(monkeypatch):
    def install(**kwargs):
        fake = FakeDocker(**kwargs)
        monkeypatch.setattr(shell_module.subprocess, "run", fake)
        return fake

    return install


@pytest.fixture
def scripted_input():
    return ScriptedInput
