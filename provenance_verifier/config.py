
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .mime import JPEG

DEFAULT_MAX_UPLOAD_BYTES = 25 * 1024 * 1024
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    default_mime_type: str = JPEG
    log_level: str = "WARNING"
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from PROVENANCE_* environment variables."""
        env = os.environ if env is None else env
        return cls(
            max_upload_bytes=_env_int(env, "PROVENANCE_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
            default_mime_type=(env.get("PROVENANCE_DEFAULT_MIME_TYPE") or "").strip() or JPEG,
            log_level=(env.get("PROVENANCE_LOG_LEVEL") or "").strip().upper() or "WARNING",
            debug=(env.get("PROVENANCE_DEBUG") or "").strip().lower() in _TRUTHY,
        )
