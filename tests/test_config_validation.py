import pytest

from decimals.config import ConfigError, load_config, normalize_config


def test_non_mapping_raises():
    with pytest.raises(ConfigError):
        normalize_config(["format"])


def test_unknown_section_raises():
    with pytest.raises(ConfigError):
        normalize_config({"paths": {"data_dir": "data"}})


def test_type_mismatch_raises():
    with pytest.raises(ConfigError):
        normalize_config({"format": {"int_precision": "3"}})
    with pytest.raises(ConfigError):
        normalize_config({"format": {"float_precision": True}})
    with pytest.raises(ConfigError):
        normalize_config({"format": {"thousands_sep": ""}})
    with pytest.raises(ConfigError):
        normalize_config({"format": ["int_precision"]})


def test_same_separators_raise():
    with pytest.raises(ConfigError):
        normalize_config({"format": {"thousands_sep": ".", "decimal_point": "."}})


def test_unknown_log_level_raises():
    with pytest.raises(ConfigError):
        normalize_config({"logging": {"level": "verbose"}})


def test_missing_file_fails(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_fails(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("format: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(bad_file)


def test_empty_file_fails(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(empty)
