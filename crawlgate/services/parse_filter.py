import logging
import warnings
from typing import Callable, Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult


class BaseParseFilter:
    """Base for parse filters: by default nothing is filtered.

    Subclasses override `filtered` and return `FilterResult.filtered_because(...)`
    when their exclusion rule matches. Configuration is set in `__init__` and
    treated as read-only afterwards, since the crawler calls filters from
    several worker threads at once.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logging.getLogger(type(self).__module__)

    def filtered(self, resource: FetchedResource) -> FilterResult:
        """Tell whether `resource` is filtered. Filtered resources are not parsed."""
        return FilterResult.NOT_FILTERED

    def is_filtered(self, resource: FetchedResource) -> bool:
        """Deprecated: use `filtered`, which also gives the reason."""
        warnings.warn(
            "is_filtered() is deprecated, use filtered() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.filtered(resource).is_filtered

    def __repr__(self):
        return f"<{type(self).__name__}>"


class CallableParseFilter(BaseParseFilter):
    """Adapts a plain `resource -> FilterResult` function to the filter interface."""

    def __init__(
        self,
        fn: Callable[[FetchedResource], FilterResult],
        name: Optional[str] = None,
        log: Optional[logging.Logger] = None,
    ):
        super().__init__(log)
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "callable")

    def filtered(self, resource: FetchedResource) -> FilterResult:
        return self._fn(resource)

    def __repr__(self):
        return f"<CallableParseFilter name={self.name}>"
