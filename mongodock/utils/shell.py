"""Shell command utilities for mongodock."""

import os
import shutil
import subprocess

from rich.markup import escape

from mongodock.utils.error_handler import handle_error
from mongodock.utils.logger import log
from mongodock.utils.sanitize import format_command


def run_command(command, capture_output=True, check=True, silent=False, env=None, echo=True):
    """
    Execute an external command and return the result.

    Args:
        command: List of arguments (never run through a shell)
        capture_output: If True, capture stdout/stderr; otherwise inherit them
        check: If True, raise exception on non-zero exit
        silent: If True, don't print errors
        env: Extra environment variables for the child, merged over os.environ
        echo: If True, print the "Executing:" step line first

    Returns:
        subprocess.CompletedProcess object with:
        - returncode: Exit code (0 = success)
        - stdout: Command output (if capture_output=True)
        - stderr: Error output (if capture_output=True)

    Raises:
        subprocess.CalledProcessError: If check=True and command fails
        FileNotFoundError: If the executable does not exist
    """
    if echo:
        log.step(f"Executing: {escape(format_command(command))}")
    if env:
        log.debug(f"Forwarding environment: {', '.join(sorted(env))}")

    child_env = {**os.environ, **env} if env else None

    try:
        result = subprocess.run(
            command,
            capture_output=capture_output,
            text=True,
            check=check,
            env=child_env,
        )
        if capture_output and result.stdout:
            log.debug(f"Output: {escape(result.stdout.strip())}")
        return result

    except subprocess.CalledProcessError as e:
        if not silent:
            handle_error("E1006", f"Command failed: {command[0]}", details=e.stderr.strip() if e.stderr else None)
        raise

    except FileNotFoundError:
        if not silent:
            handle_error("E1004", f"Command not found: {command[0]}")
        raise


def run_command_realtime(command, env=None):
    """
    Execute a command with stdout/stderr connected to the terminal.

    Args:
        command: List of arguments
        env: Extra environment variables for the child

    Returns:
        int: Return code of the command, or None if it could not be started
    """
    try:
        result = run_command(command, capture_output=False, check=False, silent=True, env=env)
    except FileNotFoundError:
        handle_error("E1004", f"Command not found: {command[0]}")
        return None
    except OSError as e:
        handle_error("E1006", f"Failed to execute: {command[0]}", details=str(e))
        return None
    return result.returncode


def is_command_available(command):
    """
    Check if a command is available in PATH.

    Args:
        command: Command name (e.g., "docker")

    Returns:
        bool: True if command is available
    """
    return shutil.which(command) is not None
