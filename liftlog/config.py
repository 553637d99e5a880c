"""Configuration management for workout tracking."""

import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


# load environment variables from .env file
load_dotenv()


def _env_path(var: str) -> Optional[Path]:
    value = os.getenv(var)
    if value is None or not value.strip():
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class PathConfig:
    """File path configuration."""

    base_dir: Path
    data_dir: Path
    output_dir: Path

    @classmethod
    def default(cls) -> "PathConfig":
        """
        Create path configuration from the environment.

        LIFTLOG_DATA_DIR and LIFTLOG_OUTPUT_DIR override the default
        data/ and output/ directories next to the package.
        """
        base = Path(__file__).parent.parent
        return cls(
            base_dir=base,
            data_dir=_env_path("LIFTLOG_DATA_DIR") or base / "data",
            output_dir=_env_path("LIFTLOG_OUTPUT_DIR") or base / "output",
        )


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration."""

    paths: PathConfig
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Load full application configuration.
        """
        log_level = os.getenv("LIFTLOG_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(
                f"Invalid LIFTLOG_LOG_LEVEL {log_level!r}. "
                "Use DEBUG, INFO, WARNING, ERROR or CRITICAL."
            )

        return cls(paths=PathConfig.default(), log_level=log_level)
