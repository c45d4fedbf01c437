import logging
from typing import Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult
from crawlgate.services.parse_filter import BaseParseFilter


class MaxParseSizeFilter(BaseParseFilter):
    """Filters responses whose body is larger than `max_size_bytes`.

    A limit of zero or less disables the check.
    """

    def __init__(self, max_size_bytes: int, log: Optional[logging.Logger] = None):
        super().__init__(log)
        self.max_size_bytes = int(max_size_bytes)

    def filtered(self, resource: FetchedResource) -> FilterResult:
        if self.max_size_bytes <= 0:
            return FilterResult.NOT_FILTERED
        size = resource.size
        if size > self.max_size_bytes:
            self.log.debug("Body of %s is %s bytes (max %s)", resource.url, size, self.max_size_bytes)
            return FilterResult.filtered_because(
                f"response body exceeds max parse size ({self.max_size_bytes} bytes)"
            )
        return FilterResult.NOT_FILTERED

    def __repr__(self):
        return f"<MaxParseSizeFilter max_size_bytes={self.max_size_bytes}>"
