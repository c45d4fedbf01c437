"""Protocol (interface) definitions for services."""

from typing import Protocol

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult


class ParseFilter(Protocol):
    """Decides whether an already fetched resource should be parsed.

    Only `filtered` is required, so a filter can be any object (or a wrapped
    function) rather than a subclass of a shared base.
    """
    def filtered(self, resource: FetchedResource) -> FilterResult:
        """Return the filter result for `resource`; never None."""
        ...
