import logging
import re
from typing import Iterable, Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult
from crawlgate.exceptions import FilterConfigError
from crawlgate.services.parse_filter import BaseParseFilter


class UrlPatternFilter(BaseParseFilter):
    """Filters resources whose URL matches one of the exclusion regexes.

    Patterns are compiled once here and matched with `re.search`.
    """

    def __init__(
        self,
        patterns: Iterable[str],
        ignore_case: bool = False,
        log: Optional[logging.Logger] = None,
    ):
        super().__init__(log)
        flags = re.IGNORECASE if ignore_case else 0
        compiled = []
        for pattern in patterns or ():
            try:
                compiled.append(re.compile(pattern, flags))
            except (re.error, TypeError) as e:
                raise FilterConfigError("url_pattern", f"has invalid pattern {pattern!r}: {e}") from e
        self._patterns = tuple(compiled)

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self._patterns)

    def filtered(self, resource: FetchedResource) -> FilterResult:
        url = resource.url or ""
        for pattern in self._patterns:
            if pattern.search(url):
                self.log.debug("URL %s matches exclusion pattern %s", url, pattern.pattern)
                return FilterResult.filtered_because(f"matches exclusion pattern: {pattern.pattern}")
        return FilterResult.NOT_FILTERED

    def __repr__(self):
        return f"<UrlPatternFilter patterns={list(self.patterns)}>"
