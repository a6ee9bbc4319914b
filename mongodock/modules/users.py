"""User actions - create a database user and print its connection string."""

from urllib.parse import quote

from rich.markup import escape

from mongodock.ui.components import console, show_success, show_info
from mongodock.ui.menu import text_input
from mongodock.utils.error_handler import handle_error, handle_exception, not_running_error, validation_error
from mongodock.utils.sanitize import validate_database_name, validate_username
from mongodock.modules.container import is_container_running
from mongodock.modules.mongo import (
    CREATE_USER_SCRIPT,
    ENV_DATABASE,
    ENV_PASSWORD,
    ENV_USERNAME,
    mongosh_failed,
    run_mongosh,
    show_user_databases,
)


def server_connection_string(settings):
    """Connection string for the server without credentials."""
    return f"mongodb://{settings.host}:{settings.host_port}/"


def user_connection_string(settings, username, password, database):
    """
    Connection string authenticating against the user's own database.

    Username and password are percent-encoded as the URI format requires.
    """
    credentials = f"{quote(username, safe='')}:{quote(password, safe='')}"
    db = quote(database, safe="")
    return f"mongodb://{credentials}@{settings.host}:{settings.host_port}/{db}?authSource={db}"


def _prompt(message, password=False):
    return (text_input(message, password=password) or "").strip()


def add_user(settings):
    """Create a user with readWrite on one database."""
    if not is_container_running(settings):
        not_running_error(settings.container_name)
        return

    show_user_databases(settings)
    console.print()

    username = _prompt("Enter username:")
    password = _prompt("Enter password:", password=True)
    database = _prompt("Enter database from the list above to assign the user to:")

    if not username or not password or not database:
        validation_error("Username, password, and database cannot be empty.")
        return

    if not validate_username(username):
        validation_error("Invalid username. Use letters, numbers, and _ . @ - only.")
        return

    if not validate_database_name(database):
        validation_error(f"Invalid database name '{database}'.")
        return

    show_info("Adding new user...")
    params = {
        ENV_DATABASE: database,
        ENV_USERNAME: username,
        ENV_PASSWORD: password,
    }
    try:
        result = run_mongosh(settings, CREATE_USER_SCRIPT, params=params)
    except OSError as e:
        handle_exception("E3002", "Failed to add user.", e)
        return

    if result.returncode != 0:
        handle_error("E3002", f"Failed to add user '{username}'.", details=mongosh_failed(result))
        return

    show_success(f"User '{username}' added to database '{database}' successfully.")
    console.print(
        f"[dim]Connection string:[/dim] "
        f"[cyan]{escape(user_connection_string(settings, username, password, database))}[/cyan]",
        highlight=False,
        soft_wrap=True,
    )
