"""
Layered settings sources for the merchant sandbox client.

Settings come from the process environment, an optional ``.env`` file and
explicit overrides. The result is a plain mapping that
:class:`merchant_sandbox.core.config.MerchantConfig` knows how to read.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional

__all__ = ["SettingsSource", "build_settings", "load_env_file", "read_env_file"]


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines; a missing file yields an empty mapping."""
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key.strip()] = value
    return values


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Copy the entries of ``path`` into ``environ`` without replacing existing keys.
    """
    target: MutableMapping[str, str] = environ if environ is not None else os.environ
    for key, value in read_env_file(Path(path)).items():
        target.setdefault(key, value)
    return dict(target)


@dataclass(frozen=True)
class SettingsSource:
    """Resolved ``MERCHANT_*`` variables plus anything else that was in scope."""

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self.variables.get(key)
        if value is None or value == "":
            return default
        return value


def build_settings(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> SettingsSource:
    """
    Merge ``base`` (default :data:`os.environ`), ``env_file`` and ``overrides``.

    File values only fill gaps left by ``base``; ``overrides`` always win.
    Pass ``env_file=None`` to skip the file.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in read_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return SettingsSource(variables=merged)
