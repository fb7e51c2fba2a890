# SPDX-License-Identifier: Apache-2.0

"""Validation functions."""

import os

from fman.exceptions import AlreadyExistsError, InvalidInputError, NotFoundError
from fman.typing import StrOrPath

# os.path predicates are used because they report any stat failure as False.


def ensure_exists(path: StrOrPath) -> None:
    """Raise if the path does not exist."""
    if not os.path.exists(path):
        raise NotFoundError(path)


def ensure_not_exists(path: StrOrPath) -> None:
    """Raise if the path exists."""
    if os.path.exists(path):
        raise AlreadyExistsError(path)


def ensure_is_file(path: StrOrPath) -> None:
    """Raise if the path is not a regular file.

    Note: A missing path is reported as not being a regular file. Call `ensure_exists` first to
    tell the two apart.
    """
    if not os.path.isfile(path):
        raise InvalidInputError(f"Not a regular file: {os.fspath(path)}")
