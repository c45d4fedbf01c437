import logging
from typing import Iterable, Optional

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.domain.filter_result import FilterResult
from crawlgate.services.parse_filter import BaseParseFilter

BINARY_CONTENT_TYPE_REASON = "binary content-type"

BINARY_PREFIXES = (
    "image/",
    "audio/",
    "video/",
    "font/",
    "application/octet-stream",
    "application/pdf",
    "application/zip",
    "application/gzip",
    "application/x-gzip",
    "application/x-tar",
    "application/x-7z-compressed",
    "application/x-rar-compressed",
    "application/vnd.",
    "application/msword",
    "application/x-shockwave-flash",
    "application/java-archive",
    "application/wasm",
)

# Structured text types that still carry links worth extracting.
TEXT_LIKE_TYPES = (
    "application/xhtml+xml",
    "application/xml",
    "application/json",
    "application/javascript",
    "application/ecmascript",
    "application/rss+xml",
    "application/atom+xml",
)


def is_text_mime_type(mime_type: str) -> bool:
    """True for text/* and the structured text types parsers understand."""
    if mime_type.startswith("text/"):
        return True
    if mime_type in TEXT_LIKE_TYPES:
        return True
    return mime_type.endswith("+xml") or mime_type.endswith("+json")


class BinaryContentTypeFilter(BaseParseFilter):
    """Filters responses whose Content-Type is binary (images, media, archives...).

    Responses without a Content-Type are not filtered: the crawler cannot tell,
    so it parses them.
    """

    def __init__(
        self,
        extra_binary_prefixes: Optional[Iterable[str]] = None,
        log: Optional[logging.Logger] = None,
    ):
        super().__init__(log)
        extra = tuple(p.strip().lower() for p in (extra_binary_prefixes or ()) if p and p.strip())
        self.binary_prefixes = BINARY_PREFIXES + extra

    def filtered(self, resource: FetchedResource) -> FilterResult:
        mime_type = resource.mime_type
        if not mime_type:
            return FilterResult.NOT_FILTERED
        if is_text_mime_type(mime_type):
            return FilterResult.NOT_FILTERED
        if mime_type.startswith(self.binary_prefixes):
            self.log.debug("Binary content-type %s for %s", mime_type, resource.url)
            return FilterResult.filtered_because(BINARY_CONTENT_TYPE_REASON)
        return FilterResult.NOT_FILTERED
