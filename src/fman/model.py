# SPDX-License-Identifier: Apache-2.0

"""Custom Base Model for pydantic classes."""

import os

import pydantic


class CustomBaseModel(pydantic.BaseModel):
    """Custom Model Config."""

    model_config = pydantic.ConfigDict(
        frozen=True,
        extra="forbid",
    )

    def to_dict(self) -> dict:
        """Convert the object into a dict."""
        return self.model_dump()


class CopyRequest(CustomBaseModel):
    """A single copy invocation."""

    source_path: str
    destination_argument: str
    overwrite_allowed: bool = False

    @pydantic.field_validator("source_path", "destination_argument", mode="before")
    @classmethod
    def _fspath(cls, value):
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value
