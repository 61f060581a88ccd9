from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    chunk_size: int
    strip_artifacts: bool


def _env(name: str) -> str:
    v = (os.environ.get(name) or "").strip()
    # Users often set env vars with quotes (e.g. cmd.exe: set CHATMD_CHUNK_SIZE="16").
    if len(v) >= 2 and v[0] == v[-1] and v[0] in ("'", '"'):
        v = v[1:-1].strip()
    return v


def _env_int(name: str, default: int) -> int:
    try:
        return max(0, int(_env(name)))
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name).lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return default


def load_settings() -> Settings:
    return Settings(
        # 0 means "feed the whole input as one chunk".
        chunk_size=_env_int("CHATMD_CHUNK_SIZE", 0),
        strip_artifacts=_env_bool("CHATMD_STRIP_ARTIFACTS", True),
    )
