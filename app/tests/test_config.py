from pathlib import Path

import pytest

from app.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("PORT", "APP_PORT", "DB_DIR", "SEED_OVERWRITE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_should_default_to_port_8080(clean_env):
    assert Settings(_env_file=None).app_port == 8080


@pytest.mark.parametrize("name", ["PORT", "APP_PORT"])
def test_should_read_port_from_either_env_name(clean_env, name):
    # GIVEN
    clean_env.setenv(name, "9090")

    # WHEN
    s = Settings(_env_file=None)

    # THEN
    assert s.app_port == 9090


def test_should_build_dataset_paths_from_db_dir(clean_env):
    # GIVEN
    clean_env.setenv("DB_DIR", "/srv/catalog")
    clean_env.setenv("SEED_OVERWRITE", "true")

    # WHEN
    s = Settings(_env_file=None)

    # THEN
    assert s.catalog_db_path == Path("/srv/catalog") / "CBNYT_sql.db"
    assert s.episodes_db_path == Path("/srv/catalog") / "ENZ_sql.db"
    assert s.seed_overwrite is True
