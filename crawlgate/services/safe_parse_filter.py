import logging
from typing import Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult
from crawlgate.services.protocols import ParseFilter

logger = logging.getLogger(__name__)


class SafeParseFilter:
    """Runs a filter so that its failures cannot stop the crawl.

    Any exception raised by the wrapped filter, or a missing result, counts as
    "not filtered": the resource gets parsed instead of being silently dropped.
    """

    def __init__(self, parse_filter: ParseFilter, log: Optional[logging.Logger] = None):
        self.parse_filter = parse_filter
        self.log = log or logger

    def filtered(self, resource: FetchedResource) -> FilterResult:
        try:
            result = self.parse_filter.filtered(resource)
        except Exception:
            self.log.exception("Parse filter %r failed for %s; not filtering", self.parse_filter, resource.url)
            return FilterResult.NOT_FILTERED

        if not isinstance(result, FilterResult):
            self.log.warning(
                "Parse filter %r returned %r for %s; not filtering",
                self.parse_filter,
                result,
                resource.url,
            )
            return FilterResult.NOT_FILTERED
        return result

    def __repr__(self):
        return f"<SafeParseFilter {self.parse_filter!r}>"
