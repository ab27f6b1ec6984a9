import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime settings, overridable through RECORDKEEPER_* environment variables
    or a .env file. Relative file names are resolved against ``data_dir``.
    """
    data_dir: Path = Field(default=Path("data"))
    inventory_file: Path = Field(default=Path("inventory.json"))
    students_file: Path = Field(default=Path("students.txt"))
    report_file: Path = Field(default=Path("report.txt"))
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="RECORDKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def resolve(self, file_name: Path) -> Path:
        return file_name if file_name.is_absolute() else self.data_dir / file_name
