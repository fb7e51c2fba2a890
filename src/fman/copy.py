# SPDX-License-Identifier: Apache-2.0

"""File copy."""

import logging
import os
import shutil
from pathlib import Path

from fman.exceptions import FmanIOError, InvalidInputError
from fman.model import CopyRequest
from fman.typing import StrOrPath
from fman.utils import log
from fman.validation import ensure_exists, ensure_is_file, ensure_not_exists

L = logging.getLogger(__name__)


@log
def copy_file(source: StrOrPath, destination: StrOrPath, overwrite_allowed: bool = False) -> None:
    """Copy a file to a destination directory or file path.

    If the destination is an existing directory the file is copied into it under its original
    name, otherwise the destination is used as the target file path.

    Args:
        source: Path to the source file.
        destination: Destination directory or full destination file path.
        overwrite_allowed: If False, raise when the resolved destination already exists.

    Raises:
        NotFoundError: If the source does not exist.
        InvalidInputError: If the source is not a regular file or, when the destination is a
            directory, if the source has no file name.
        AlreadyExistsError: If the resolved destination exists and overwriting is not allowed.
        FmanIOError: If the copy itself fails.
    """
    request = CopyRequest(
        source_path=source,
        destination_argument=destination,
        overwrite_allowed=overwrite_allowed,
    )

    ensure_exists(request.source_path)
    ensure_is_file(request.source_path)

    target = resolve_destination_path(request.source_path, request.destination_argument)

    if not request.overwrite_allowed:
        ensure_not_exists(target)

    L.info("Copying %s -> %s", request.source_path, target)

    try:
        shutil.copyfile(request.source_path, target)
    except OSError as e:
        raise FmanIOError(e) from e


@log
def resolve_destination_path(source: StrOrPath, destination: StrOrPath) -> str:
    """Return the file path a copy of source into destination writes to.

    The destination is treated as a directory only if it is an existing directory at call time.
    Otherwise it is returned unchanged, trailing separator included.

    Raises:
        InvalidInputError: If the destination is a directory and source has no file name.
    """
    if not os.path.isdir(destination):
        return os.fspath(destination)

    filename = Path(source).name

    # '..' is a parent reference, not a name
    if filename in {"", ".."}:
        raise InvalidInputError(f"Source path '{os.fspath(source)}' has no file name")

    return os.path.join(destination, filename)
