"""Bot configuration loaded from a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Mapping

DEFAULT_PATH = Path("./config.toml")

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Config:
    """Credentials needed to log the bot in."""

    api_id: int
    api_hash: str = field(repr=False)
    bot_token: str = field(repr=False)

    @classmethod
    def read(cls, path: str | PathLike[str] = DEFAULT_PATH) -> Config:
        """Load the configuration from a TOML file.

        Raises OSError if the file cannot be opened, tomllib.TOMLDecodeError
        if it is not valid TOML and ValueError if a field is missing or has
        the wrong type.
        """
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
        return cls._from_mapping(data)

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> Config:
        for name in ("api_id", "api_hash", "bot_token"):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
        api_id = data["api_id"]
        if isinstance(api_id, bool) or not isinstance(api_id, int):
            raise ValueError("field `api_id` must be an integer")
        if not _I32_MIN <= api_id <= _I32_MAX:
            raise ValueError("field `api_id` is out of range for a 32-bit integer")
        for name in ("api_hash", "bot_token"):
            if not isinstance(data[name], str):
                raise ValueError(f"field `{name}` must be a string")
        return cls(api_id=api_id, api_hash=data["api_hash"], bot_token=data["bot_token"])