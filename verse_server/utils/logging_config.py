"""
Centralized logging configuration for the server using RichHandler.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

_handler_configured = False
_console = Console()  # Shared by the log handler, the startup progress display and the summary panel


class ModuleBlockerFilter(logging.Filter):
    """Drops records from the given logger prefixes while blocking is active.

    Used to keep loader chatter from tearing the Rich progress display
    during startup.
    """

    def __init__(self, name=''):
        super().__init__(name)
        self.blocked_prefixes = []
        self.blocking_active = False

    def set_blocked_prefixes(self, prefixes: list[str]):
        self.blocked_prefixes = list(prefixes)

    def set_blocking(self, active: bool):
        self.blocking_active = active

    def filter(self, record: logging.LogRecord) -> bool:
        if self.blocking_active:
            return not any(record.name.startswith(prefix) for prefix in self.blocked_prefixes)
        return True


_module_blocker = ModuleBlockerFilter()


def setup_logging(debug_mode: bool = False):
    """
    Configure the root logger with a single RichHandler.

    Runs once per process; later calls only adjust the level.

    Args:
        debug_mode: DEBUG level with source paths and local variables in
            tracebacks; otherwise INFO.
    """
    global _handler_configured
    log_level = logging.DEBUG if debug_mode else logging.INFO
    root_logger = logging.getLogger()

    if _handler_configured:
        root_logger.setLevel(log_level)
        return

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=_console,
        show_time=True,
        show_level=True,
        show_path=debug_mode,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=debug_mode,
    )
    rich_handler.addFilter(_module_blocker)

    root_logger.setLevel(log_level)
    root_logger.addHandler(rich_handler)

    # Werkzeug prints its own request lines
    logging.getLogger("werkzeug").propagate = False
    # Per-request HTTP chatter from the API clients
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _handler_configured = True


def get_console() -> Console:
    """Returns the shared Rich Console instance."""
    return _console


def get_module_blocker_filter() -> ModuleBlockerFilter:
    """Returns the shared module blocking filter instance."""
    return _module_blocker
