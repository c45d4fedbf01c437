import pytest

from crawlgate.exceptions import FilterConfigError
from crawlgate.services.filter_config_store import FilterConfigStore


def test_load_yaml_dict_reads_relative_path(tmp_path):
    tmp_path.joinpath("filters.yml").write_text("filters:\n  - type: default\n")
    store = FilterConfigStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict("filters.yml") == {"filters": [{"type": "default"}]}


def test_load_yaml_dict_missing_file_returns_none(tmp_path):
    store = FilterConfigStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict("nope.yml") is None


def test_load_yaml_dict_empty_file(tmp_path):
    tmp_path.joinpath("empty.yml").write_text("")
    store = FilterConfigStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict(str(tmp_path / "empty.yml")) == {}


def test_load_yaml_dict_rejects_non_mapping(tmp_path):
    tmp_path.joinpath("list.yml").write_text("- a\n- b\n")
    store = FilterConfigStore(configs_dir=str(tmp_path))
    with pytest.raises(FilterConfigError):
        store.load_yaml_dict("list.yml")


def test_load_yaml_dict_rejects_malformed_yaml(tmp_path):
    tmp_path.joinpath("bad.yml").write_text("filters: [unclosed\n")
    store = FilterConfigStore(configs_dir=str(tmp_path))
    with pytest.raises(FilterConfigError):
        store.load_yaml_dict("bad.yml")

