"""Reading of key=value configuration files."""

from __future__ import annotations

import os


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


def load_config(path: str | os.PathLike[str]) -> dict[str, str]:
    """Load a configuration file of ``KEY=VALUE`` lines.

    Blank lines and lines starting with ``#`` are skipped. The value is
    everything after the first ``=``.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise ConfigError(f"cannot load configuration file {path}: {exc}") from exc

    values: dict[str, str] = {}
    for number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, value = stripped.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"{path}:{number}: expected KEY=VALUE, got {line!r}")
        values[key.strip()] = value.strip()
    return values