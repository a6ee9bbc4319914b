"""Interactive menu system for mongodock using InquirerPy."""

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from InquirerPy.utils import InquirerPyStyle

from mongodock.config import APP_NAME


# Green theme style
MENU_STYLE = InquirerPyStyle({
    "questionmark": "#7CFC00 bold",
    "answermark": "#7CFC00 bold",
    "answer": "#7CFC00",
    "input": "#ffffff",
    "question": "#ffffff bold",
    "answered_question": "#ffffff",
    "instruction": "#666666",
    "long_instruction": "#666666",
    "pointer": "#7CFC00 bold",
    "separator": "#666666",
    "skipped": "#666666",
    "validator": "#ff0000",
    "marker": "#7CFC00",
    "fuzzy_prompt": "#7CFC00",
    "fuzzy_info": "#666666",
    "fuzzy_border": "#7CFC00",
    "fuzzy_match": "#7CFC00 bold",
    "frame.border": "#7CFC00",
})


def show_main_menu(options, title=None):
    """
    Display the main menu and return the selected option.

    Args:
        options: List of tuples (key, label) for menu items
        title: Menu title (optional)

    Returns:
        str: Selected menu key or None if cancelled
    """
    if title is None:
        title = f"{APP_NAME}"

    choices = [Choice(value=key, name=label) for key, label in options]

    try:
        result = inquirer.fuzzy(
            message=f"{title} - Please choose an option:",
            choices=choices,
            default=None,
            border=True,
            pointer="›",
            marker="›",
            cycle=True,
            max_height="70%",
            instruction="(↑↓ navigate, type to filter, enter to select)",
            style=MENU_STYLE,
        ).execute()
        return result
    except KeyboardInterrupt:
        return None


def text_input(message, default="", password=False):
    """
    Show a text input prompt.

    Args:
        message: Prompt message
        default: Default value
        password: If True, hide input (for passwords)

    Returns:
        str: User input or None if cancelled
    """
    try:
        if password:
            return inquirer.secret(
                message=message,
                style=MENU_STYLE,
            ).execute()
        else:
            return inquirer.text(
                message=message,
                default=default,
                style=MENU_STYLE,
            ).execute()
    except KeyboardInterrupt:
        return None
