# SPDX-License-Identifier: Apache-2.0

"""fman exceptions."""


class FmanError(Exception):
    """fman exception class."""


class NotFoundError(FmanError):
    """The source path does not exist."""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Source file not found: {self.path}")


class InvalidInputError(FmanError):
    """The path is not usable for the requested operation.

    Raised for sources that are not regular files and for sources without a filename component
    when the destination is a directory.
    """

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"Invalid input: {detail}")


class AlreadyExistsError(FmanError):
    """The destination exists and overwriting was not allowed."""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Destination file already exists: {self.path}")


class FmanIOError(FmanError):
    """Wrapper for operating system errors.

    The wrapped error is displayed as is.
    """

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(str(error))
