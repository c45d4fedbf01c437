import logging
from typing import Optional

from crawlgate.exceptions import FilterConfigError
from crawlgate.services.filter_config_parser import FilterConfigParser
from crawlgate.services.filter_config_store import FilterConfigStore
from crawlgate.services.parse_filter_chain import ParseFilterChain
from crawlgate.services.protocols import ParseFilter

logger = logging.getLogger(__name__)


class ParseFilterChainFactory:
    """Builds the crawl's `ParseFilterChain`.

    Uses the filters declared in `filters_file` when one is configured,
    otherwise just `default_filter`.
    """

    def __init__(
        self,
        *,
        store: FilterConfigStore,
        parser: FilterConfigParser,
        default_filter: ParseFilter,
        filters_file: Optional[str] = None,
    ):
        self.store = store
        self.parser = parser
        self.default_filter = default_filter
        self.filters_file = filters_file

    def create(self) -> ParseFilterChain:
        if not self.filters_file:
            logger.debug("No filters file configured; using %r", self.default_filter)
            return ParseFilterChain([self.default_filter])

        data = self.store.load_yaml_dict(self.filters_file)
        if data is None:
            raise FilterConfigError(self.filters_file, "not found")
        filters = self.parser.parse(source=self.filters_file, data=data)
        if not filters:
            logger.warning("Filters file %s declares no filters; nothing will be filtered", self.filters_file)
        logger.info("Loaded %s parse filters from %s", len(filters), self.filters_file)
        return ParseFilterChain(filters)
