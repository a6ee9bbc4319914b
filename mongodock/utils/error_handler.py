"""Centralized error handling for mongodock.

Provides:
- MongodockError exception class with error codes
- Rich console panel plus a JSON-lines error log
- Auto-detection of common docker/mongosh issues with contextual suggestions
- Log rotation by date (keep 7 days)
"""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, List, Dict, Any

from rich.panel import Panel
from rich.text import Text

from mongodock.config import LOG_DIR as _LOG_DIR
from mongodock.ui.components import console

LOG_DIR = Path(_LOG_DIR)

ERROR_CODES = {
    # E1xxx - SYSTEM
    "E1001": ("System", "Permission denied"),
    "E1004": ("System", "Command not found"),
    "E1006": ("System", "Command failed"),

    # E2xxx - CONTAINER
    "E2001": ("Container", "Container failed to start"),
    "E2002": ("Container", "Container not running"),
    "E2003": ("Container", "Container removal failed"),

    # E3xxx - DATABASE
    "E3001": ("Database", "Database creation failed"),
    "E3002": ("Database", "User creation failed"),
    "E3003": ("Database", "Database info failed"),
    "E3004": ("Database", "Database listing failed"),
    "E3005": ("Database", "Invalid input"),
}

KNOWN_ISSUES = {
    "daemon_down": {
        "patterns": ["Cannot connect to the Docker daemon", "Is the docker daemon running", "error during connect"],
        "suggestions": [
            "Start Docker: sudo systemctl start docker",
            "Or open Docker Desktop and wait until it is running",
        ]
    },
    "permission": {
        "patterns": ["permission denied while trying to connect", "Permission denied", "EACCES"],
        "suggestions": [
            "Add your user to the docker group: sudo usermod -aG docker $USER",
            "Log out and back in for the group change to apply",
        ]
    },
    "port_in_use": {
        "patterns": ["port is already allocated", "Address already in use", "bind: address"],
        "suggestions": [
            "Find process using port: sudo lsof -i :27017",
            "Or stop the other MongoDB instance bound to that port",
        ]
    },
    "name_conflict": {
        "patterns": ["is already in use by container", "Conflict. The container name"],
        "suggestions": [
            "Stop and remove the existing container from the menu first",
            "Or run: docker rm -f <container>",
        ]
    },
    "image_pull": {
        "patterns": ["pull access denied", "manifest unknown", "TLS handshake timeout"],
        "suggestions": [
            "Check that the image name and tag exist on the registry",
            "Check network access to the registry: docker pull mongo:latest",
        ]
    },
    "duplicate_user": {
        "patterns": ["already exists", "Location51003"],
        "suggestions": [
            "Choose a different username",
            "Check existing users with 'Get Database Info'",
        ]
    },
    "shell_missing": {
        "patterns": ["executable file not found", "mongosh: not found"],
        "suggestions": [
            "Use an image that ships mongosh (mongo:6 or newer)",
        ]
    },
}


class MongodockError(Exception):
    """A reported failure: error code, message, and what was detected about it."""

    def __init__(self, code: str, message: str, details: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        self.code = code
        self.message = message
        self.details = details
        self.category, self.title = ERROR_CODES.get(code, ("Unknown", "Unknown error"))
        self.suggestions = list(suggestions or [])
        self.timestamp = datetime.now()

        if details:
            self.suggestions.extend(s for s in _known_issue_suggestions(details) if s not in self.suggestions)

        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "code": self.code,
            "category": self.category,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }


def _known_issue_suggestions(details: str) -> List[str]:
    """Suggestions for every known issue whose pattern appears in the details."""
    text = details.lower()
    found = []
    for issue in KNOWN_ISSUES.values():
        if any(pattern.lower() in text for pattern in issue["patterns"]):
            found.extend(issue["suggestions"])
    return found


def _append_to_log(error: MongodockError) -> Optional[Path]:
    """Append the error as one JSON line to today's log; None if the log is unwritable."""
    log_file = LOG_DIR / f"error-{error.timestamp:%Y-%m-%d}.log"
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(error.to_dict()) + "\n")
    except OSError:
        return None
    return log_file


def _render(error: MongodockError, log_file: Optional[Path]) -> None:
    body = Text(error.message + "\n", style="bold red")

    if error.details:
        body.append("\nDetected: ", style="bold")
        body.append(error.details + "\n", style="yellow")

    if error.suggestions:
        body.append("\nSuggestions:\n", style="bold")
        for i, suggestion in enumerate(error.suggestions, 1):
            body.append(f"  {i}. {suggestion}\n", style="cyan")

    if log_file is not None:
        body.append(f"\nLog: {log_file}", style="dim")

    console.print(Panel(
        body,
        title=f"[bold red]ERROR {error.code}[/bold red] [dim]{error.title}[/dim]",
        border_style="red",
        padding=(0, 1),
    ))


def handle_error(code: str, message: str, details: Optional[str] = None,
                 suggestions: Optional[List[str]] = None) -> MongodockError:
    """
    Report an error: show it as a red panel and log it to file.

    Args:
        code: Error code (e.g., "E2001")
        message: Operator-facing message
        details: Tool output, also scanned for known issues
        suggestions: Extra suggestions shown before the detected ones

    Returns:
        MongodockError describing what was reported
    """
    error = MongodockError(code, message, details=details, suggestions=suggestions)
    _render(error, _append_to_log(error))
    return error


def handle_exception(code: str, message: str, exception: Exception) -> MongodockError:
    """Report a caught exception, preferring its stderr as the details."""
    details = str(exception)
    if getattr(exception, "stderr", None):
        details = exception.stderr.strip()
    return handle_error(code, message, details=details)


def init_error_handler(keep_days: int = 7) -> None:
    """Remove error logs older than keep_days."""
    if not LOG_DIR.exists():
        return

    cutoff = datetime.now() - timedelta(days=keep_days)
    for log_file in LOG_DIR.glob("error-*.log"):
        try:
            logged_on = datetime.strptime(log_file.stem[len("error-"):], "%Y-%m-%d")
            if logged_on < cutoff:
                log_file.unlink()
        except (ValueError, OSError):
            continue


def validation_error(message: str) -> MongodockError:
    return handle_error("E3005", message)


def not_running_error(container_name: str) -> MongodockError:
    return handle_error(
        "E2002",
        f"MongoDB container '{container_name}' is not running. Please start it first.",
        suggestions=["Choose 'Start MongoDB Container' from the menu"],
    )
