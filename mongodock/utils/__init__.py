"""Utility functions for mongodock - shell commands, logging, error handling."""

from mongodock.utils.shell import (
    run_command,
    run_command_realtime,
    is_command_available,
)

from mongodock.utils.process import (
    InterruptibleProcess,
    IDLE,
    RUNNING,
    COMPLETED,
    INTERRUPTED,
)

from mongodock.utils.logger import (
    Logger,
    log,
)

from mongodock.utils.error_handler import (
    MongodockError,
    handle_error,
    handle_exception,
    init_error_handler,
    validation_error,
    not_running_error,
    ERROR_CODES,
)
