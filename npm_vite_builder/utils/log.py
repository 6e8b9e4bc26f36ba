"""
Logging utilities for the npm Vite builder.

Provides colorful CLI logging using the rich library.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape


# Global console instances
console = Console()
error_console = Console(stderr=True)

# Logger instances cache
_loggers: dict = {}


def setup_logger(
    name: str = "npm_vite_builder",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger with rich formatting.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path to write logs

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    _loggers[name] = logger
    return logger


def get_logger(name: str = "npm_vite_builder") -> logging.Logger:
    """
    Get a component logger.

    Component names are nested under the root ``npm_vite_builder`` logger so
    that a single ``setup_logger()`` call controls every component.

    Args:
        name: Component or logger name

    Returns:
        Logger instance
    """
    if name in _loggers:
        return _loggers[name]
    if name != "npm_vite_builder" and not name.startswith("npm_vite_builder."):
        name = f"npm_vite_builder.{name}"
    return logging.getLogger(name)


def print_status(message: str, style: str = "bold blue") -> None:
    """
    Print a styled status message.

    Args:
        message: Message to print
        style: Rich style string
    """
    console.print(f"[{style}]{escape(message)}[/{style}]")


def print_error(message: str) -> None:
    """
    Print an error message to stderr.

    Args:
        message: Error message to print
    """
    error_console.print(f"[bold red]❌ {escape(message)}[/bold red]", highlight=False)


def print_success(message: str) -> None:
    """Print a success message."""
    print_status(f"✅ {message}", "bold green")


def print_warning(message: str) -> None:
    """Print a warning message."""
    print_status(f"⚠️  {message}", "bold yellow")


def print_info(message: str) -> None:
    """Print an info message."""
    print_status(f"→ {message}", "bold cyan")


def print_traceback() -> None:
    """Print the exception currently being handled to stderr."""
    error_console.print_exception()
