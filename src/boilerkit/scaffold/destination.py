"""Destination directory reconciliation."""

from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path

from boilerkit.errors import CancelledError

logger = logging.getLogger(__name__)

# A directory holding only one of these still counts as empty.
VCS_METADATA_DIRS: tuple[str, ...] = (".git",)


class DestinationState(Enum):
    """What was found at the target directory."""

    MISSING = "missing"
    EMPTY = "empty"
    NON_EMPTY = "non_empty"


def is_empty(path: Path) -> bool:
    """Check whether ``path`` has no entries besides VCS metadata."""
    names = [entry.name for entry in path.iterdir()]
    return not names or (len(names) == 1 and names[0] in VCS_METADATA_DIRS)


def inspect_destination(path: Path) -> DestinationState:
    """Classify the target directory without touching it."""
    if not path.exists():
        return DestinationState.MISSING
    if is_empty(path):
        return DestinationState.EMPTY
    return DestinationState.NON_EMPTY


def empty_dir(path: Path) -> None:
    """Remove every child of ``path``, VCS metadata included.

    Does nothing if ``path`` does not exist.
    """
    if not path.exists():
        return
    for entry in path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink(missing_ok=True)
        logger.debug("Removed %s", entry)


def prepare_destination(path: Path, overwrite: bool = False) -> DestinationState:
    """Make ``path`` ready to receive a template tree.

    Args:
        path: Target directory.
        overwrite: Explicit confirmation to wipe a non-empty directory.

    Returns:
        The state found before any change was made.

    Raises:
        CancelledError: If the directory is not empty and ``overwrite`` is not
            exactly True. Nothing is removed in that case.
    """
    state = inspect_destination(path)

    if state is DestinationState.MISSING:
        path.mkdir(parents=True, exist_ok=True)
        logger.info("Created %s", path)
    elif state is DestinationState.NON_EMPTY:
        if overwrite is not True:
            raise CancelledError()
        logger.info("Emptying %s", path)
        empty_dir(path)

    return state
