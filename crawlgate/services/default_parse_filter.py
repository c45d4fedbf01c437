import logging
from typing import Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult
from crawlgate.services.content_type_filter import is_text_mime_type
from crawlgate.services.parse_filter import BaseParseFilter

MAX_SIZE_REASON = "response body exceeds max parse size"
NOT_TEXT_REASON = "not text content"


class DefaultParseFilter(BaseParseFilter):
    """The crawler's default admission rule.

    Filters responses that are too big to parse and responses that are not
    text. `/robots.txt` and `/sitemap.xml` are still parsed when enabled,
    whatever Content-Type the server sent for them.
    """

    def __init__(
        self,
        max_parse_size_bytes: int,
        parse_robots_txt: bool = True,
        parse_sitemap_xml: bool = True,
        log: Optional[logging.Logger] = None,
    ):
        super().__init__(log)
        self.max_parse_size_bytes = int(max_parse_size_bytes)
        self.parse_robots_txt = bool(parse_robots_txt)
        self.parse_sitemap_xml = bool(parse_sitemap_xml)

    def _is_special_file(self, resource: FetchedResource) -> bool:
        path = resource.path
        if self.parse_robots_txt and path == "/robots.txt":
            return True
        if self.parse_sitemap_xml and path.endswith("/sitemap.xml"):
            return True
        return False

    def filtered(self, resource: FetchedResource) -> FilterResult:
        if 0 < self.max_parse_size_bytes < resource.size:
            self.log.debug("Skipping parse of %s: %s bytes", resource.url, resource.size)
            return FilterResult.filtered_because(MAX_SIZE_REASON)

        if self._is_special_file(resource):
            return FilterResult.NOT_FILTERED

        mime_type = resource.mime_type
        # Unknown type: parse rather than drop.
        if mime_type and not is_text_mime_type(mime_type):
            return FilterResult.filtered_because(NOT_TEXT_REASON)
        return FilterResult.NOT_FILTERED

    def __repr__(self):
        return (
            f"<DefaultParseFilter max_parse_size_bytes={self.max_parse_size_bytes} "
            f"robots={self.parse_robots_txt} sitemap={self.parse_sitemap_xml}>"
        )
