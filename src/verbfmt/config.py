"""Data form of a format configuration.

FormatConfig captures a prefix and verb set as plain data so callers can
load them from their own settings and hand them to VerbFormatBuilder.

Usage:
    config = FormatConfig.from_dict({"prefix": "$", "verbs": "nv"})
    fmt = VerbFormatBuilder.from_config(config).build()

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_PREFIX = "%"
"""Prefix used when none is configured."""


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Attributes:
        prefix: Verb prefix character ("" means DEFAULT_PREFIX)
        verbs: Verb characters to allow, in any order

    """

    prefix: str = ""
    verbs: tuple[str, ...] = ()

    @property
    def effective_prefix(self) -> str:
        """The prefix that compilation will use."""
        return self.prefix or DEFAULT_PREFIX

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> FormatConfig:
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored. ``verbs`` may be a string ("sd") or any
        iterable of single characters.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({"verbs": "sd", "unknown_key": 1})
            >>> config.verbs
            ('s', 'd')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "verbs" in filtered:
            filtered["verbs"] = tuple(filtered["verbs"])
        return cls(**filtered)


__all__ = ["DEFAULT_PREFIX", "FormatConfig"]
