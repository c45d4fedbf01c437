import logging
from typing import Iterable, Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult
from crawlgate.services.protocols import ParseFilter
from crawlgate.services.safe_parse_filter import SafeParseFilter

logger = logging.getLogger(__name__)


class ParseFilterChain:
    """Applies an ordered set of parse filters to each fetched resource.

    A resource is excluded from parsing when any filter reports it filtered.
    Evaluation stops at the first such filter, and its reason becomes the
    chain's reason. The chain holds no per-resource state, so a single
    instance can be shared by all fetch workers.
    """

    def __init__(self, filters: Iterable[ParseFilter], log: Optional[logging.Logger] = None):
        self.log = log or logger
        self._filters = tuple(
            f if isinstance(f, SafeParseFilter) else SafeParseFilter(f, self.log)
            for f in filters
        )

    @property
    def filters(self) -> tuple[ParseFilter, ...]:
        return tuple(f.parse_filter for f in self._filters)

    def __len__(self):
        return len(self._filters)

    def filtered(self, resource: FetchedResource) -> FilterResult:
        for parse_filter in self._filters:
            result = parse_filter.filtered(resource)
            if result.is_filtered:
                self.log.info(
                    "Skipping parse of %s (%s): %s",
                    resource.url,
                    type(parse_filter.parse_filter).__name__,
                    result.reason or "filtered",
                )
                return result
        return FilterResult.NOT_FILTERED

    def should_parse(self, resource: FetchedResource) -> bool:
        """Gate used by the parse stage."""
        return not self.filtered(resource).is_filtered

    def evaluate_all(self, resource: FetchedResource) -> list[tuple[ParseFilter, FilterResult]]:
        """Every filter's result for `resource`, in order, without short-circuiting.

        Meant for audit/reporting; the decision itself comes from `filtered`.
        """
        return [(f.parse_filter, f.filtered(resource)) for f in self._filters]

    def __repr__(self):
        return f"<ParseFilterChain filters={list(self.filters)}>"
