"""Data models for the endpoint catalogue.

The catalogue is read-only input: every RPC command with its arguments,
options, example response and lifecycle status.
"""

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class Status(str, Enum):
    """Lifecycle stage of an endpoint."""

    ACTIVE = "Active"
    EXPERIMENTAL = "Experimental"
    DEPRECATED = "Deprecated"
    REMOVED = "Removed"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class Argument(BaseModel):
    """A single input slot of an endpoint (positional argument or option)."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str  # bool / int / uint / int64 / string / array / file
    default: str | None = None
    description: str = ""
    required: bool = False

    @field_validator("default", mode="before")
    @classmethod
    def _stringify_default(cls, value):
        # YAML hands us 30 or true where the catalogue means "30" or "true"
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @property
    def is_file(self) -> bool:
        return self.type == "file"


class Endpoint(BaseModel):
    """One RPC command, addressed by its path-like name."""

    model_config = ConfigDict(frozen=True)

    name: str  # /api/v0/add
    description: str = ""
    arguments: list[Argument] = []
    options: list[Argument] = []
    response: str = ""
    status: Status = Status.ACTIVE

    @field_validator("response", mode="before")
    @classmethod
    def _serialize_response(cls, value):
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return value


def in_status(endpoints: list[Endpoint], status: Status) -> list[Endpoint]:
    """Return the endpoints with the given status, in catalogue order."""
    return [e for e in endpoints if e.status == status]
