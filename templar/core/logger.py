"""Logging for Templar.

Every module logs under the ``templar`` logger. One Rich handler on that
logger writes to stderr at INFO, which is where mock-mode notices appear.
Git commands go to the ``templar.git`` channel at DEBUG, so they only show
up with ``--verbose`` or in the file given with ``--log-file``.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "templar"
GIT_LOGGER = "templar.git"

console = Console(stderr=True)


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(logging.INFO)
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``templar`` hierarchy.

    Names outside it (``__main__``, test modules) are nested under
    ``templar`` so they share its handlers.
    """
    _root_logger()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def get_git_logger() -> logging.Logger:
    """The channel every executed (or mocked) git command is written to."""
    return get_logger(GIT_LOGGER)


def setup_logging(verbose: bool = False, log_file: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Apply the CLI logging options.

    Args:
        verbose: Lower the console handler to DEBUG so git commands are echoed
        log_file: Also write every record, git commands included, to this file

    Returns:
        The log file actually opened, or None without ``log_file``

    Note:
        Falls back to the system temp directory when the log directory
        cannot be created. A file that is already attached is not added twice.
    """
    root = _root_logger()
    level = logging.DEBUG if verbose else logging.INFO

    for handler in root.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)

    if log_file is None:
        return None

    target = Path(log_file).expanduser()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target = Path(tempfile.gettempdir()) / "templar.log"

    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(target):
            return target

    file_handler = logging.FileHandler(target)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(file_handler)
    root.debug(f"Logging to {target}")
    return target
