from unittest.mock import MagicMock

import pytest

from crawlgate.exceptions import FilterConfigError
from crawlgate.services.default_parse_filter import DefaultParseFilter
from crawlgate.services.filter_config_parser import FilterConfigParser
from crawlgate.services.filter_config_store import FilterConfigStore
from crawlgate.services.parse_filter_chain_factory import ParseFilterChainFactory
from crawlgate.services.url_pattern_filter import UrlPatternFilter


def test_without_filters_file_uses_default_filter():
    default = DefaultParseFilter(1024)
    factory = ParseFilterChainFactory(store=MagicMock(), parser=MagicMock(), default_filter=default)
    chain = factory.create()
    assert chain.filters == (default,)


def test_filters_file_is_loaded(tmp_path):
    tmp_path.joinpath("filters.yml").write_text(
        "filters:\n  - type: url_pattern\n    patterns: ['/logout']\n"
    )
    factory = ParseFilterChainFactory(
        store=FilterConfigStore(configs_dir=str(tmp_path)),
        parser=FilterConfigParser(max_parse_size_bytes=1024),
        default_filter=DefaultParseFilter(1024),
        filters_file="filters.yml",
    )
    chain = factory.create()
    assert len(chain) == 1
    assert isinstance(chain.filters[0], UrlPatternFilter)


def test_missing_filters_file_raises(tmp_path):
    factory = ParseFilterChainFactory(
        store=FilterConfigStore(configs_dir=str(tmp_path)),
        parser=FilterConfigParser(max_parse_size_bytes=1024),
        default_filter=DefaultParseFilter(1024),
        filters_file="absent.yml",
    )
    with pytest.raises(FilterConfigError):
        factory.create()
