from pathlib import Path

import pytest

from lrucache.config.defaults import DEFAULTS
from lrucache.config.loader import load_config, validate_config


def write_config(tmp_path: Path, text: str) -> Path:
    config_path = tmp_path / "config.toml"
    config_path.write_text(text, encoding="utf-8")
    return config_path


def test_missing_file_yields_default_capacity_and_level(tmp_path: Path) -> None:
    loaded = load_config(tmp_path / "config.toml")
    assert loaded["cache"]["capacity"] == 128
    assert loaded["logging"]["level"] == "info"
    loaded["cache"]["capacity"] = 1
    assert DEFAULTS["cache"]["capacity"] == 128


def test_capacity_override_keeps_default_level(tmp_path: Path) -> None:
    loaded = load_config(write_config(tmp_path, "[cache]\ncapacity = 16\n"))
    assert loaded["cache"]["capacity"] == 16
    assert loaded["logging"]["level"] == "info"


def test_level_is_normalized_to_lowercase(tmp_path: Path) -> None:
    loaded = load_config(write_config(tmp_path, '[logging]\nlevel = "WARNING"\n'))
    assert loaded["logging"]["level"] == "warning"
    assert loaded["cache"]["capacity"] == 128


@pytest.mark.parametrize(
    "text",
    [
        'logging = "debug"\n',
        "cache = 5\n",
        "[cache]\ncapacity = 0\n",
        "[cache]\ncapacity = -2\n",
        '[cache]\ncapacity = "64"\n',
        "[cache]\ncapacity = true\n",
        "[cache]\ncapacity = 2.5\n",
        '[logging]\nlevel = "verbose"\n',
        "[logging]\nlevel = 10\n",
        "this is not valid toml",
    ],
)
def test_malformed_settings_raise_value_error(tmp_path: Path, text: str) -> None:
    config_path = write_config(tmp_path, text)
    with pytest.raises(ValueError, match="Invalid config file"):
        load_config(config_path)


def test_validate_config_keeps_unrelated_tables() -> None:
    loaded = validate_config({"cache": {"capacity": 4}, "extra": {"note": "kept"}})
    assert loaded["cache"]["capacity"] == 4
    assert loaded["extra"] == {"note": "kept"}


def test_load_config_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        load_config(tmp_path)
