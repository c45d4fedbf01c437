from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional
from urllib.parse import urlparse

_EMPTY_HEADERS: Mapping[str, str] = MappingProxyType({})


class FetchedResource(NamedTuple):
    """A completed HTTP exchange handed to the parse filters.

    Read-only: filters inspect it, they never change it.
    """
    url: str
    status_code: int
    text: str = ""
    content_type: Optional[str] = None
    headers: Mapping[str, str] = _EMPTY_HEADERS
    body_size: Optional[int] = None

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup; None when absent."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def mime_type(self) -> str:
        """Media type without parameters, lower-cased ("" when unknown)."""
        ct = self.content_type
        if ct is None:
            ct = self.header("Content-Type")
        if not ct:
            return ""
        return ct.split(";", 1)[0].strip().lower()

    @property
    def size(self) -> int:
        if self.body_size is not None:
            return self.body_size
        return len((self.text or "").encode("utf-8"))

    @property
    def path(self) -> str:
        return urlparse(self.url).path or "/"
