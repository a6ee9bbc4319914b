"""
mongodock - MongoDB Docker Manager

Entry point for the application.
"""

import sys

from mongodock.config import APP_NAME, APP_VERSION, Settings
from mongodock.ui.components import (
    clear_screen,
    console,
    press_enter_to_continue,
    show_header,
    show_status_bar,
    show_success,
    show_error,
    show_warning,
)
from mongodock.ui.menu import show_main_menu
from mongodock.utils.error_handler import init_error_handler
from mongodock.utils.shell import is_command_available

from mongodock.modules import container
from mongodock.modules import database
from mongodock.modules import users


MENU_OPTIONS = [
    ("1", "[1] Start MongoDB Container"),
    ("2", "[2] Stop MongoDB Container"),
    ("3", "[3] View Live Logs"),
    ("4", "[4] Add New Database"),
    ("5", "[5] Add New User"),
    ("6", "[6] Get Database Info"),
    ("7", "[7] Exit"),
]

EXIT_CHOICE = "7"

ACTIONS = {
    "1": container.start_container,
    "2": container.stop_container,
    "3": container.view_logs,
    "4": database.add_database,
    "5": users.add_user,
    "6": database.get_database_info,
}


def check_python_version():
    """Ensure Python 3.8+ is being used."""
    if sys.version_info < (3, 8):
        print(f"Error: {APP_NAME} requires Python 3.8 or higher.")
        print(f"Current version: {sys.version}")
        sys.exit(1)


def show_docker_warning(settings):
    """Show warning if the container runtime is not on PATH."""
    if not is_command_available(settings.docker_bin):
        show_warning(f"'{settings.docker_bin}' was not found in PATH. Most actions will fail.")
        console.print("[dim]Install Docker: https://docs.docker.com/get-docker/[/dim]")
        console.print()


def handle_choice(choice, settings):
    """
    Run the action for one menu choice.

    Returns:
        bool: False when the operator chose to exit, True otherwise
    """
    choice = (choice or "").strip()

    if choice == EXIT_CHOICE:
        show_success("Exiting. Goodbye!")
        return False

    action = ACTIONS.get(choice)
    if action is None:
        show_error("Invalid choice. Please try again.")
        return True

    action(settings)
    return True


def main_loop(settings):
    """Main menu loop."""
    while True:
        clear_screen()
        show_header()
        show_status_bar(settings, container.get_container_state(settings))
        show_docker_warning(settings)

        choice = show_main_menu(MENU_OPTIONS, title=f"{APP_NAME} v{APP_VERSION}")

        if not handle_choice(choice, settings):
            break

        press_enter_to_continue()


def main():
    """Main entry point."""
    check_python_version()
    init_error_handler()

    settings = Settings()
    main_loop(settings)


def run():
    """Console script entry point."""
    try:
        main()
    except KeyboardInterrupt:
        print("\n")
        console.print("[dim]Exiting...[/dim]")
        sys.exit(0)


if __name__ == "__main__":
    run()
