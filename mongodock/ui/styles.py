"""Theme and style definitions for mongodock."""

# Color constants
PRIMARY = "cyan"
SUCCESS = "green"
WARNING = "yellow"
ERROR = "red"
MUTED = "dim"


# Container state indicators
INDICATOR_RUNNING = f"[{SUCCESS}]●[/{SUCCESS}] Running"
INDICATOR_STOPPED = f"[{ERROR}]●[/{ERROR}] Stopped"
INDICATOR_MISSING = f"[{MUTED}]○ Not created[/{MUTED}]"
