from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, computed_field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    app_name: str = "Ministry Media Catalog"
    app_host: str = "0.0.0.0"
    app_port: int = Field(default=8080, validation_alias=AliasChoices("PORT", "APP_PORT"))
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Datasets (read-only SQLite files, seeded on first boot)
    db_dir: Path = Path("./data")
    seed_dir: Path = Path("./seed")
    seed_overwrite: bool = False
    catalog_db_file: str = "CBNYT_sql.db"
    episodes_db_file: str = "ENZ_sql.db"

    # Facets
    regional_category: str = "Choirs in concert"

    @computed_field
    @property
    def catalog_db_path(self) -> Path:
        return self.db_dir / self.catalog_db_file

    @computed_field
    @property
    def episodes_db_path(self) -> Path:
        return self.db_dir / self.episodes_db_file

settings = Settings()
