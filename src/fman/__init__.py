# SPDX-License-Identifier: Apache-2.0

"""A simple file management library."""

from fman.copy import copy_file
from fman.exceptions import (
    AlreadyExistsError,
    FmanError,
    FmanIOError,
    InvalidInputError,
    NotFoundError,
)
from fman.typing import StrOrPath
from fman.version import __version__


def copy_file_safe(source: StrOrPath, destination: StrOrPath) -> None:
    """Copy a file without overwriting the destination.

    Args:
        source: Path to the source file.
        destination: Destination directory or full destination file path.

    Raises:
        AlreadyExistsError: If the resolved destination already exists.
    """
    copy_file(source, destination, overwrite_allowed=False)


def copy_file_force(source: StrOrPath, destination: StrOrPath) -> None:
    """Copy a file, overwriting the destination if it exists."""
    copy_file(source, destination, overwrite_allowed=True)


__all__ = [
    "AlreadyExistsError",
    "FmanError",
    "FmanIOError",
    "InvalidInputError",
    "NotFoundError",
    "__version__",
    "copy_file_force",
    "copy_file_safe",
]
