"""Dependency injection container for the application."""
from dependency_injector import containers, providers

from crawlgate import config as env
from crawlgate.services.default_parse_filter import DefaultParseFilter
from crawlgate.services.filter_config_parser import FilterConfigParser
from crawlgate.services.filter_config_store import FilterConfigStore
from crawlgate.services.parse_filter_chain_factory import ParseFilterChainFactory


# Environment variables used by the container (read via `crawlgate.config` helpers).
#
# CRAWLGATE_MAX_PARSE_SIZE_BYTES (int, default: 2097152)
#   Responses with a larger body are not parsed. <= 0 disables the limit.
#
# CRAWLGATE_PARSE_ROBOTS_TXT (bool, default: true)
#   Parse /robots.txt even when its Content-Type is not text.
#
# CRAWLGATE_PARSE_SITEMAP_XML (bool, default: true)
#   Parse sitemap.xml even when its Content-Type is not text.
#
# CRAWLGATE_FILTERS_FILE (str | optional)
#   YAML file declaring the parse filters. If unset, only the default filter runs.
ENV = {
    "CRAWLGATE_MAX_PARSE_SIZE_BYTES": env.max_parse_size_bytes(),
    "CRAWLGATE_PARSE_ROBOTS_TXT": env.parse_robots_txt(),
    "CRAWLGATE_PARSE_SITEMAP_XML": env.parse_sitemap_xml(),
    "CRAWLGATE_FILTERS_FILE": env.filters_file(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for crawlgate."""

    config = providers.Configuration(default=ENV)

    default_parse_filter = providers.Singleton(
        DefaultParseFilter,
        max_parse_size_bytes=config.CRAWLGATE_MAX_PARSE_SIZE_BYTES.as_(int),
        parse_robots_txt=config.CRAWLGATE_PARSE_ROBOTS_TXT.as_(bool),
        parse_sitemap_xml=config.CRAWLGATE_PARSE_SITEMAP_XML.as_(bool),
    )

    filter_config_store = providers.Singleton(
        FilterConfigStore,
    )

    filter_config_parser = providers.Singleton(
        FilterConfigParser,
        max_parse_size_bytes=config.CRAWLGATE_MAX_PARSE_SIZE_BYTES.as_(int),
        parse_robots_txt=config.CRAWLGATE_PARSE_ROBOTS_TXT.as_(bool),
        parse_sitemap_xml=config.CRAWLGATE_PARSE_SITEMAP_XML.as_(bool),
    )

    parse_filter_chain_factory = providers.Singleton(
        ParseFilterChainFactory,
        store=filter_config_store,
        parser=filter_config_parser,
        default_filter=default_parse_filter,
        filters_file=config.CRAWLGATE_FILTERS_FILE,
    )

    # Built once and shared by every fetch worker.
    parse_filter_chain = providers.Singleton(
        ParseFilterChainFactory.create,
        parse_filter_chain_factory,
    )
