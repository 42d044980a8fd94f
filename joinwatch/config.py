"""Bot configuration read from an env file and the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = "configs/bot.env"


@dataclass(frozen=True)
class PostgresConfig:
    url: str = ""


@dataclass(frozen=True)
class TelegramConfig:
    token: str = ""


@dataclass(frozen=True)
class Config:
    postgres: PostgresConfig
    telegram: TelegramConfig


def load_config(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> Config:
    """Load ``path`` into the environment and build the configuration.

    Variables already present in the environment are kept. Raises
    ``FileNotFoundError`` when the file does not exist.
    """
    env_file = Path(path)
    if not env_file.is_file():
        raise FileNotFoundError(f"config file not found: {env_file}")
    load_dotenv(env_file, override=False)
    return Config(
        postgres=PostgresConfig(url=os.environ.get("POSTGRES_URL", "")),
        telegram=TelegramConfig(token=os.environ.get("TOKEN_TG", "")),
    )