# SPDX-License-Identifier: Apache-2.0

"""Entry point for python -m fman."""

from fman.cli import main

if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter
