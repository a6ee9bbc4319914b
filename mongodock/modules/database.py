"""Database actions - create a database, show database information."""

from mongodock.ui.components import console, show_success, show_info
from mongodock.ui.menu import text_input
from mongodock.utils.error_handler import handle_error, handle_exception, not_running_error, validation_error
from mongodock.utils.sanitize import validate_database_name
from mongodock.modules.container import is_container_running
from mongodock.modules.mongo import (
    ADMIN_USERS_SCRIPT,
    CREATE_DATABASE_SCRIPT,
    DATABASE_INFO_SCRIPT,
    ENV_DATABASE,
    mongosh_failed,
    run_mongosh,
)
from mongodock.modules.users import server_connection_string


def add_database(settings):
    """Create a database by creating its first collection."""
    if not is_container_running(settings):
        not_running_error(settings.container_name)
        return

    db_name = (text_input("Enter new database name:") or "").strip()
    if not db_name:
        validation_error("Database name cannot be empty.")
        return

    if not validate_database_name(db_name):
        validation_error(
            f"Invalid database name '{db_name}'. "
            "Use up to 63 characters without spaces or any of / \\ . \" $ * < > : | ?"
        )
        return

    show_info(f"Creating database '{db_name}'...")
    try:
        result = run_mongosh(settings, CREATE_DATABASE_SCRIPT, params={ENV_DATABASE: db_name})
    except OSError as e:
        handle_exception("E3001", "Failed to create database.", e)
        return

    if result.returncode != 0:
        handle_error("E3001", f"Failed to create database '{db_name}'.", details=mongosh_failed(result))
        return

    show_success(f"Database '{db_name}' created successfully.")


def get_database_info(settings):
    """Print administrative users, then users and stats for every user database."""
    if not is_container_running(settings):
        not_running_error(settings.container_name)
        return

    show_info("Fetching information for all databases...")
    console.print("[yellow]Note: Passwords are encrypted and cannot be displayed.[/yellow]")

    try:
        console.print()
        console.print("[bold]Administrative users[/bold]")
        result = run_mongosh(settings, ADMIN_USERS_SCRIPT)
        if result.returncode != 0:
            handle_error("E3003", "Failed to list administrative users.", details=mongosh_failed(result))
            return

        result = run_mongosh(settings, DATABASE_INFO_SCRIPT)
    except OSError as e:
        handle_exception("E3003", "Failed to retrieve database info.", e)
        return

    if result.returncode != 0:
        handle_error("E3003", "Failed to retrieve database info.", details=mongosh_failed(result))
        return

    console.print()
    console.print(f"[dim]Server:[/dim] [cyan]{server_connection_string(settings)}[/cyan]", highlight=False, soft_wrap=True)
    show_success("Finished retrieving database information.")
