# SPDX-License-Identifier: Apache-2.0

"""Typing definitions."""

import os

StrOrPath = str | os.PathLike[str]
