# SPDX-License-Identifier: Apache-2.0

"""Utilities."""

import functools
import inspect
import logging
import os
from contextlib import contextmanager

L = logging.getLogger(__name__)


def log(function, logger=L):
    """Log the signature of a function.

    Note: Do not use for functions that receive large inputs as it may slow down runtime.
    """

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        signature = inspect.signature(function)

        bound = signature.bind(*args, **kwargs)
        bound.apply_defaults()

        str_v = "  " + "\n  ".join([f"{k} = {v!r}" for k, v in bound.arguments.items()])

        str_function_repr = f" Name: {function.__name__}\n" f" Args: \n{str_v}\n"
        logger.debug("Executed function:\n%s\n", str_function_repr)

        return function(*args, **kwargs)

    return wrapper


@contextmanager
def cwd(path):
    """Context manager to temporarily change the working directory."""
    original_cwd = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(original_cwd)
