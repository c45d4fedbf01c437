from types import MappingProxyType

import requests

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.services.content_type_filter import is_text_mime_type


def resource_from_response(response: requests.Response) -> FetchedResource:
    """Build a `FetchedResource` from a `requests` response.

    The body size is taken from the raw bytes. Bodies of non-text responses
    are not decoded since nothing will parse them.
    """
    raw_headers = response.headers or {}
    content_type = raw_headers.get("Content-Type")
    headers = MappingProxyType(dict(raw_headers))
    content = response.content or b""

    mime_type = (content_type or "").split(";", 1)[0].strip().lower()
    text = response.text if not mime_type or is_text_mime_type(mime_type) else ""

    return FetchedResource(
        url=response.url,
        status_code=response.status_code,
        text=text,
        content_type=content_type,
        headers=headers,
        body_size=len(content),
    )
