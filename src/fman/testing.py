# SPDX-License-Identifier: Apache-2.0

"""Testing resources."""

import os
from pathlib import Path
from unittest.mock import patch

from fman.typing import StrOrPath


def setup_temp_file(directory: StrOrPath, name: str, content: str | bytes) -> Path:
    """Create a file with the given name and content in directory."""
    path = Path(directory, name)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


def setup_temp_dir(directory: StrOrPath, name: str) -> Path:
    """Create a directory with the given name in directory."""
    path = Path(directory, name)
    path.mkdir(parents=True, exist_ok=True)
    return path


def patchenv(**envvars):
    """Patch function environment."""
    return patch.dict(os.environ, envvars, clear=True)
