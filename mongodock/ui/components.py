"""Reusable UI components for mongodock."""

from rich.console import Console
from rich.table import Table

from mongodock.config import APP_NAME, APP_VERSION, APP_TAGLINE, APP_DESCRIPTION
from mongodock.ui.styles import PRIMARY, SUCCESS, WARNING, ERROR

# Global console instance
console = Console()


def clear_screen():
    """Clear the terminal screen."""
    console.clear()


def show_header():
    """Display the application header/branding with ASCII art."""
    # Green gradient colors (light to dark)
    c1 = "#7CFC00"
    c2 = "#66d900"
    c3 = "#4fb800"
    c4 = "#3a9900"
    c5 = "#2a7a00"
    c6 = "#1f5c00"

    console.print()
    console.print(f"[{c1}] ███╗   ███╗ ██████╗ ███╗   ██╗ ██████╗  ██████╗ [/{c1}]")
    console.print(f"[{c2}] ████╗ ████║██╔═══██╗████╗  ██║██╔════╝ ██╔═══██╗[/{c2}]")
    console.print(f"[{c3}] ██╔████╔██║██║   ██║██╔██╗ ██║██║  ███╗██║   ██║[/{c3}]")
    console.print(f"[{c4}] ██║╚██╔╝██║██║   ██║██║╚██╗██║██║   ██║██║   ██║[/{c4}]")
    console.print(f"[{c5}] ██║ ╚═╝ ██║╚██████╔╝██║ ╚████║╚██████╔╝╚██████╔╝[/{c5}]")
    console.print(f"[{c6}] ╚═╝     ╚═╝ ╚═════╝ ╚═╝  ╚═══╝ ╚═════╝  ╚═════╝ [/{c6}]")
    console.print(f"  [bold cyan]{APP_TAGLINE}[/bold cyan]  [dim]{APP_NAME} v{APP_VERSION}[/dim]")
    console.print(f"  [dim]{APP_DESCRIPTION}[/dim]")
    console.print()


def show_status_bar(settings, state):
    """
    Display the managed container's identity and state.

    Args:
        settings: Settings in effect
        state: Markup string from ui.styles (INDICATOR_*)
    """
    console.print(
        f"[dim]Container:[/dim] [cyan]{settings.container_name}[/cyan] "
        f"[dim]|[/dim] [dim]Image:[/dim] [cyan]{settings.image}[/cyan] "
        f"[dim]|[/dim] [dim]Port:[/dim] [cyan]{settings.port_mapping}[/cyan] "
        f"[dim]|[/dim] {state}"
    )
    console.print()


def show_table(title, columns, rows, show_header=True):
    """
    Display data in a formatted table.

    Args:
        title: Table title
        columns: List of column definitions, each is dict with 'name' and optional 'style', 'justify'
        rows: List of row data (list of values matching column order)
        show_header: Whether to show column headers

    Example:
        columns = [
            {"name": "#", "justify": "right"},
            {"name": "Database", "style": "cyan"},
        ]
        rows = [
            [1, "admin"],
            [2, "shop"],
        ]
        show_table("Databases", columns, rows)
    """
    table = Table(title=title, show_header=show_header, border_style="dim")

    for col in columns:
        table.add_column(
            col.get("name", ""),
            style=col.get("style", None),
            justify=col.get("justify", "left"),
        )

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)
    console.print()


def show_success(message):
    """Display a success message."""
    console.print(f"[{SUCCESS}]✓[/{SUCCESS}] {message}")


def show_error(message):
    """Display an error message."""
    console.print(f"[{ERROR}]✗[/{ERROR}] {message}")


def show_warning(message):
    """Display a warning message."""
    console.print(f"[{WARNING}]![/{WARNING}] {message}")


def show_info(message):
    """Display an info message."""
    console.print(f"[{PRIMARY}]→[/{PRIMARY}] {message}")


def press_enter_to_continue():
    """Wait for user to press Enter."""
    console.print()
    console.input("[dim]Press Enter to return to the menu...[/dim]")
