"""Runtime settings for the PGN import pipeline."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

from pgn_import.utils.logger import set_level
from pgn_import.variation_mode import VariationMode

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_VARIATION_MODE = VariationMode.SINGLE
DEFAULT_FEN_EN_PASSANT = "legal"
DEFAULT_BATCH_WORKERS = 4
_FEN_EN_PASSANT_MODES = ("legal", "fen", "xfen")


def _env(name: str, default: str) -> str:
    return os.getenv(name, default).strip() or default


def _read_batch_workers() -> int:
    value = _env("PGN_IMPORT_BATCH_WORKERS", str(DEFAULT_BATCH_WORKERS))
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"PGN_IMPORT_BATCH_WORKERS must be an integer, got {value!r}") from exc


@dataclass(slots=True)
class Settings:
    """Import pipeline configuration.

    Every field defaults to its ``PGN_IMPORT_*`` environment variable, read
    when the instance is created.
    """

    log_level: str = field(default_factory=lambda: _env("PGN_IMPORT_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    variation_mode: VariationMode = field(
        default_factory=lambda: _env("PGN_IMPORT_VARIATION_MODE", DEFAULT_VARIATION_MODE)
    )
    fen_en_passant: str = field(
        default_factory=lambda: _env("PGN_IMPORT_FEN_EN_PASSANT", DEFAULT_FEN_EN_PASSANT)
    )
    batch_workers: int = field(default_factory=_read_batch_workers)

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {self.log_level}")
        try:
            self.variation_mode = VariationMode(str(self.variation_mode).lower())
        except ValueError as exc:
            raise ValueError(f"Unknown variation mode: {self.variation_mode}") from exc
        self.fen_en_passant = self.fen_en_passant.lower()
        if self.fen_en_passant not in _FEN_EN_PASSANT_MODES:
            raise ValueError(f"Unknown FEN en-passant mode: {self.fen_en_passant}")
        if self.batch_workers < 1:
            raise ValueError("batch_workers must be at least 1")


def get_settings() -> Settings:
    """Load ``.env`` overrides and return fresh settings.

    The package log level follows ``Settings.log_level``.
    """
    load_dotenv()
    settings = Settings()
    set_level(settings.log_level)
    return settings


@lru_cache(maxsize=1)
def default_settings() -> Settings:
    """Settings used by imports called without explicit settings.

    Read from ``.env`` and the environment on first use only. Unlike
    ``get_settings`` this leaves the package log level alone.
    """
    load_dotenv()
    return Settings()
