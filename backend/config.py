from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Optional

from dotenv import dotenv_values


_DOTENV_PATH: Final[str] = ".env"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Application configuration loaded from environment variables.

    This wrapper keeps configuration access explicit and fully typed.
    """

    environment: str
    rounding_places: int
    clamp_rates: bool


def _parse_bool(name: str, raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise RuntimeError(f"{name} must be a boolean flag, got {raw!r}.")


def _parse_places(name: str, raw: str) -> int:
    try:
        places = int(raw.strip())
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from exc
    if places < 0:
        raise RuntimeError(f"{name} must not be negative, got {places}.")
    return places


def _load_from_env() -> Settings:
    """Load configuration from `.env` and OS environment variables."""
    dotenv_config = dotenv_values(_DOTENV_PATH)

    def _get(name: str, default: Optional[str] = None) -> Optional[str]:
        value = os.getenv(name)
        if value is not None:
            return value
        return dotenv_config.get(name) or default

    environment = _get("ENV", "development") or "development"

    # Two places mirror a currency representation.
    rounding_places = _parse_places(
        "DISCOUNT_ROUNDING_PLACES",
        _get("DISCOUNT_ROUNDING_PLACES", "2") or "2",
    )
    clamp_rates = _parse_bool(
        "DISCOUNT_CLAMP_RATES",
        _get("DISCOUNT_CLAMP_RATES", "false") or "false",
    )

    return Settings(
        environment=environment,
        rounding_places=rounding_places,
        clamp_rates=clamp_rates,
    )


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Return a cached instance of loaded application settings."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = _load_from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _SETTINGS
    _SETTINGS = None
