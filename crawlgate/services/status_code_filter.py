import logging
from typing import Iterable, Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult
from crawlgate.services.parse_filter import BaseParseFilter


class StatusCodeFilter(BaseParseFilter):
    """Filters responses by HTTP status.

    - `excluded` lists status codes that are never parsed.
    - `allowed_range` (inclusive `(low, high)`), when given, filters every
      status outside it.
    """

    def __init__(
        self,
        excluded: Optional[Iterable[int]] = None,
        allowed_range: Optional[tuple[int, int]] = None,
        log: Optional[logging.Logger] = None,
    ):
        super().__init__(log)
        self.excluded = frozenset(int(code) for code in (excluded or ()))
        if allowed_range is not None:
            low, high = (int(v) for v in allowed_range)
            if low > high:
                raise ValueError(f"allowed_range low {low} is greater than high {high}")
            allowed_range = (low, high)
        self.allowed_range = allowed_range

    def filtered(self, resource: FetchedResource) -> FilterResult:
        try:
            status = int(resource.status_code)
        except (TypeError, ValueError):
            self.log.debug("Unreadable status %r for %s", resource.status_code, resource.url)
            return FilterResult.NOT_FILTERED

        if status in self.excluded:
            return FilterResult.filtered_because(f"status code {status}")
        if self.allowed_range is not None:
            low, high = self.allowed_range
            if not low <= status <= high:
                return FilterResult.filtered_because(f"status code {status}")
        return FilterResult.NOT_FILTERED

    def __repr__(self):
        return f"<StatusCodeFilter excluded={sorted(self.excluded)} allowed_range={self.allowed_range}>"
