"""App settings, read from ``GROEI_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from groei_rekenmodel.formatting import SUPPORTED_LOCALES

T = TypeVar("T")


@dataclass(frozen=True)
class Settings:
    log_level: str
    locale: str
    default_initial: float
    default_monthly: float
    default_rate: float
    default_goal: float
    default_years: int


def _env(environ: Mapping[str, str], key: str, default: T, cast: Callable[[str], T]) -> T:
    # Empty variables count as unset.
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{key} heeft een ongeldige waarde: {raw!r}") from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    locale = _env(env, "GROEI_LOCALE", "en", str).lower()
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"GROEI_LOCALE moet een van {SUPPORTED_LOCALES} zijn.")

    return Settings(
        log_level=_env(env, "GROEI_LOG_LEVEL", "INFO", str).upper(),
        locale=locale,
        default_initial=_env(env, "GROEI_DEFAULT_INITIAL", 10000.0, float),
        default_monthly=_env(env, "GROEI_DEFAULT_MONTHLY", 1000.0, float),
        default_rate=_env(env, "GROEI_DEFAULT_RATE", 10.0, float),
        default_goal=_env(env, "GROEI_DEFAULT_GOAL", 1000000.0, float),
        default_years=_env(env, "GROEI_DEFAULT_YEARS", 10, int),
    )
