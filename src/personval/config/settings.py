"""Settings for the personval CLI.

Values come from, highest first: flags actually given on the command
line, ``PERSONVAL_*`` environment variables, then the defaults below.
Output options nest under ``PERSONVAL_OUTPUT__*``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class OutputConfig(BaseModel):
    """Human-readable rendering options."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = 100


class PersonvalSettings(BaseSettings):
    """CLI flags merged with the environment, frozen after construction."""

    model_config = {
        "frozen": True,
        "env_prefix": "PERSONVAL_",
        "env_nested_delimiter": "__",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_cli(cls, **flags: Any) -> PersonvalSettings:
        """Build settings, letting unset (falsy) flags fall through to the env."""
        return cls(**{name: value for name, value in flags.items() if value})
