"""Domain objects for crawlgate - explicit re-exports to satisfy linters."""
from .fetched_resource import FetchedResource as FetchedResource
from .filter_result import FilterResult as FilterResult

__all__ = ["FetchedResource", "FilterResult"]
