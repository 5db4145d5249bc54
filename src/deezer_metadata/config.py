# deezer_metadata/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

import math
from dataclasses import dataclass
from os import getenv

from dotenv import load_dotenv

load_dotenv(override=True)

API_ROOT = "https://api.deezer.com"

DEFAULT_USER_AGENT = "deezer-metadata/0.1.0"
# Same as httpx.Timeout's default.
DEFAULT_TIMEOUT = 5.0


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = getenv(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False

    msg = f"{name} must be a boolean (true/false, yes/no, on/off, 1/0), got {raw!r}."
    raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Knobs for the shared HTTP client and the collection decode policy."""

    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    verify_tls: bool = True
    strict_collections: bool = False

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Build settings from DEEZER_* environment variables.

        Missing variables fall back to the class defaults.
        """
        raw_timeout = getenv("DEEZER_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                msg = f"DEEZER_TIMEOUT must be a number, got {raw_timeout!r}."
                raise ValueError(msg) from None
            if not math.isfinite(timeout) or timeout <= 0:
                msg = f"DEEZER_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}."
                raise ValueError(msg)

        return cls(
            user_agent=getenv("DEEZER_USER_AGENT") or DEFAULT_USER_AGENT,
            timeout=timeout,
            verify_tls=_env_flag("DEEZER_VERIFY_TLS", True),
            strict_collections=_env_flag("DEEZER_STRICT_COLLECTIONS", False),
        )
