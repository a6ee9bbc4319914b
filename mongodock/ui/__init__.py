"""UI components for mongodock - menus, styles, and reusable widgets."""

from mongodock.ui.styles import (
    PRIMARY, SUCCESS, WARNING, ERROR, MUTED,
    INDICATOR_RUNNING, INDICATOR_STOPPED, INDICATOR_MISSING,
)

from mongodock.ui.components import (
    console,
    clear_screen,
    show_header,
    show_status_bar,
    show_table,
    show_success,
    show_error,
    show_warning,
    show_info,
    press_enter_to_continue,
)

from mongodock.ui.menu import (
    show_main_menu,
    text_input,
)
