"""Configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from salvo.ai.random_search import DEFAULT_MAX_ATTEMPTS

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.salvo", ".env.salvo.local")

ENV_KEYS = frozenset(
    {
        "SALVO_RANDOM_MAX_ATTEMPTS",
        "SALVO_SEED",
        "SALVO_LOG_LEVEL",
        "SALVO_LOG_DIR",
        "LOG_LEVEL",
        "LOG_FORMAT",
    }
)


def read_env_file(path: Path) -> dict[str, str]:
    """Return the recognised ``KEY=VALUE`` pairs of one env file.

    Comments, malformed lines and keys outside ``ENV_KEYS`` are skipped. A value
    wrapped in matching single or double quotes is unwrapped.
    """
    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or key not in ENV_KEYS:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def load_env_files(
    paths: Iterable[str] = DEFAULT_ENV_FILES, *, override_existing: bool = True
) -> dict[str, str]:
    """Merge env files (later files win) and export the result.

    With ``override_existing=False`` variables already set in the process keep
    their value. Returns the merged file values.
    """
    merged: dict[str, str] = {}
    for path in paths:
        env_path = Path(path)
        if env_path.is_file():
            merged.update(read_env_file(env_path))
    for key, value in merged.items():
        if override_existing or key not in os.environ:
            os.environ[key] = value
    return merged


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class AttackerSettings:
    """Tunables for the CPU attacker."""

    random_max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: int | None = None

    @classmethod
    def from_env(cls) -> AttackerSettings:
        return cls(
            random_max_attempts=max(1, _int("SALVO_RANDOM_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)),
            seed=_optional_int("SALVO_SEED"),
        )
