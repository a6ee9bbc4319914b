"""MongoDB container lifecycle - status, start, stop, live logs."""

import re
import subprocess

from mongodock.ui.components import clear_screen, show_success, show_warning, show_info
from mongodock.ui.styles import INDICATOR_RUNNING, INDICATOR_STOPPED, INDICATOR_MISSING
from mongodock.utils.error_handler import handle_error, handle_exception, not_running_error
from mongodock.utils.process import InterruptibleProcess
from mongodock.utils.shell import run_command, run_command_realtime


def _list_container_ids(settings, all_states=False):
    """Return `docker ps` output for the container with exactly the configured name."""
    command = [settings.docker_bin, "ps"]
    if all_states:
        command.append("-a")
    # docker treats the name filter as an unanchored regex
    command.extend(["-q", "-f", f"name=^{re.escape(settings.container_name)}$"])
    return run_command(command, check=True, silent=True, echo=False).stdout


def is_container_running(settings):
    """
    Check whether the managed container is running.

    A failing check (docker missing, daemon down) is reported and
    treated as "not running".
    """
    try:
        output = _list_container_ids(settings)
    except (subprocess.CalledProcessError, OSError) as e:
        handle_exception("E1006", "Failed to check container status.", e)
        return False
    return bool(output.strip())


def container_exists(settings):
    """
    Check whether a container with the configured name exists in any state.

    Returns:
        bool: True or False, or None if docker could not be queried (reported)
    """
    try:
        output = _list_container_ids(settings, all_states=True)
    except (subprocess.CalledProcessError, OSError) as e:
        handle_exception("E1006", "Failed to check container status.", e)
        return None
    return bool(output.strip())


def get_container_state(settings):
    """Return a status indicator for the header bar without reporting errors."""
    try:
        if _list_container_ids(settings).strip():
            return INDICATOR_RUNNING
        if _list_container_ids(settings, all_states=True).strip():
            return INDICATOR_STOPPED
    except (subprocess.CalledProcessError, OSError):
        return INDICATOR_MISSING
    return INDICATOR_MISSING


def start_container(settings):
    """Start a new MongoDB container unless one is already running."""
    if is_container_running(settings):
        show_info(f"Container '{settings.container_name}' is already running.")
        return

    show_info(f"Starting MongoDB container named '{settings.container_name}'...")
    returncode = run_command_realtime([
        settings.docker_bin, "run", "-d",
        "--name", settings.container_name,
        "-p", settings.port_mapping,
        settings.image,
    ])
    if returncode is None:
        return
    if returncode != 0:
        handle_error("E2001", f"Failed to start MongoDB container (exit code {returncode}).")
        return

    show_success("MongoDB container started successfully.")


def stop_container(settings):
    """Stop and remove the managed container."""
    exists = container_exists(settings)
    if exists is None:
        return
    if not exists:
        show_info(f"Container '{settings.container_name}' not found.")
        return

    show_info(f"Stopping and removing container '{settings.container_name}'...")

    returncode = run_command_realtime([settings.docker_bin, "stop", settings.container_name])
    if returncode != 0:
        show_warning("Failed to stop container, it might already be stopped.")

    returncode = run_command_realtime([settings.docker_bin, "rm", settings.container_name])
    if returncode != 0:
        handle_error("E2003", f"Failed to remove container '{settings.container_name}'.")
        return

    show_success("MongoDB container stopped and removed successfully.")


def view_logs(settings):
    """Stream container logs until the container stops or Ctrl+C is pressed."""
    if not is_container_running(settings):
        not_running_error(settings.container_name)
        return None

    clear_screen()
    show_info("Showing live logs... Press Ctrl+C to stop and return to the menu.")

    runner = InterruptibleProcess(
        [settings.docker_bin, "logs", "-f", settings.container_name],
        completed_message="Log stream ended because the container stopped.",
        interrupted_message="Log streaming stopped.",
    )
    return runner.run()
