import codecs
import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationError

# Accepted spellings for a configured direction, mapped to the canonical value
DIRECTION_ALIASES = {
    "latin-to-cyrillic": "latin-to-cyrillic",
    "cyrillic-to-latin": "cyrillic-to-latin",
    "l2c": "latin-to-cyrillic",
    "c2l": "cyrillic-to-latin",
}


class TransliterationConfig(BaseModel):
    """Engine policy with validation."""

    default_direction: Optional[str] = None
    shield_markup: bool = True

    @field_validator('default_direction')
    @classmethod
    def validate_direction(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "" or v.lower() == "auto":
            return None
        canonical = DIRECTION_ALIASES.get(v.lower())
        if canonical is None:
            raise ConfigurationError(f"Unknown transliteration direction: {v}")
        return canonical


class CharsetConfig(BaseModel):
    default_encoding: str = "utf-8"
    supported_encodings: list[str] = Field(default_factory=lambda: [
        "utf-8", "windows-1251", "koi8-r", "iso-8859-5", "cp866",
        "windows-1252", "iso-8859-1"
    ])

    @field_validator('default_encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {v}")
        return v.lower()


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {v}")
        return level

    @field_validator('backup_count')
    @classmethod
    def validate_backup_count(cls, v: int) -> int:
        if v < 0:
            raise ConfigurationError("backup_count cannot be negative")
        return v


class Config(BaseSettings):
    transliteration: TransliterationConfig = Field(default_factory=TransliterationConfig)
    charset: CharsetConfig = Field(default_factory=CharsetConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        env_file = ".env"
        env_prefix = "UZT_"
        env_nested_delimiter = "__"

    @classmethod
    def from_toml(cls, path: str | Path) -> "Config":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)

        return cls(**data)


_config: Optional[Config] = None


def load_config(path: Optional[str | Path] = None) -> Config:
    global _config
    if _config is None:
        if path is None:
            path = os.environ.get("UZT_CONFIG", "uztranslit.toml")

        config_path = Path(path)
        if config_path.exists():
            _config = Config.from_toml(config_path)
        else:
            _config = Config()

    return _config


def get_config() -> Config:
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    global _config
    _config = None
