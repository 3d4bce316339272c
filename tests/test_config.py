"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from budgetview.config import BaseConfig, DevConfig, TestConfig, get_config


def test_defaults(tmp_path):
    config = BaseConfig()

    assert config.DEV_MODE is True
    assert config.DATA_DIR == (tmp_path / "instance").resolve()
    assert config.PAGE_SIZE == 5
    assert config.BUCKET_COUNT == 12
    assert config.VARIANCE == 0.2
    assert config.WEDGE_GAP == 2.0
    assert config.OUTER_RADIUS == 90.0
    assert config.INNER_RADIUS == 40.0
    assert config.RANDOM_SEED is None


def test_data_dir_is_not_created_on_load(tmp_path):
    BaseConfig()

    assert not (tmp_path / "instance").exists()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BUDGETVIEW_DEV_MODE", "off")
    monkeypatch.setenv("BUDGETVIEW_PAGE_SIZE", "20")
    monkeypatch.setenv("BUDGETVIEW_VARIANCE", "0.05")
    monkeypatch.setenv("BUDGETVIEW_RANDOM_SEED", "99")
    monkeypatch.setenv("BUDGETVIEW_DATA_DIR", str(tmp_path / "elsewhere"))

    config = BaseConfig()

    assert config.DEV_MODE is False
    assert config.PAGE_SIZE == 20
    assert config.VARIANCE == 0.05
    assert config.RANDOM_SEED == 99
    assert config.DATA_DIR == Path(tmp_path / "elsewhere").resolve()


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_truthy_dev_mode_values(monkeypatch, value):
    monkeypatch.setenv("BUDGETVIEW_DEV_MODE", value)

    assert BaseConfig().DEV_MODE is True


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("BUDGETVIEW_PAGE_SIZE", "ten", "must be a number"),
        ("BUDGETVIEW_PAGE_SIZE", "0", "PAGE_SIZE"),
        ("BUDGETVIEW_BUCKET_COUNT", "-1", "BUCKET_COUNT"),
        ("BUDGETVIEW_VARIANCE", "1.5", "VARIANCE"),
        ("BUDGETVIEW_WEDGE_GAP", "-2", "WEDGE_GAP"),
        ("BUDGETVIEW_INNER_RADIUS", "120", "INNER_RADIUS"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=message):
        BaseConfig()


def test_test_config_is_seeded():
    assert TestConfig().RANDOM_SEED == 1234


def test_get_config_by_name():
    assert isinstance(get_config("dev"), DevConfig)
    assert isinstance(get_config("test"), TestConfig)
    assert type(get_config("base")) is BaseConfig

    with pytest.raises(ValueError, match="Unknown config"):
        get_config("prod")
