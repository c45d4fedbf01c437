import logging
from typing import Callable, Optional

from crawlgate.exceptions import FilterConfigError
from crawlgate.services.content_type_filter import BinaryContentTypeFilter
from crawlgate.services.default_parse_filter import DefaultParseFilter
from crawlgate.services.protocols import ParseFilter
from crawlgate.services.size_filter import MaxParseSizeFilter
from crawlgate.services.status_code_filter import StatusCodeFilter
from crawlgate.services.url_pattern_filter import UrlPatternFilter

logger = logging.getLogger(__name__)


class FilterConfigParser:
    """Parse a YAML dict into an ordered list of parse filters.

    Responsibility: schema/validation for filter config files.
    It does NOT perform filesystem IO.

    Expected shape::

        filters:
          - type: default
          - type: url_pattern
            patterns: ["\\.pdf$", "/logout"]
          - type: status_code
            allowed_range: [200, 299]
    """

    def __init__(
        self,
        *,
        max_parse_size_bytes: int,
        parse_robots_txt: bool = True,
        parse_sitemap_xml: bool = True,
    ):
        self.max_parse_size_bytes = max_parse_size_bytes
        self.parse_robots_txt = parse_robots_txt
        self.parse_sitemap_xml = parse_sitemap_xml
        self._builders: dict[str, Callable[[dict], ParseFilter]] = {
            "default": self._build_default,
            "binary_content_type": self._build_binary_content_type,
            "url_pattern": self._build_url_pattern,
            "max_size": self._build_max_size,
            "status_code": self._build_status_code,
        }

    def parse(self, *, source: str, data: Optional[dict]) -> list[ParseFilter]:
        if not data:
            return []
        entries = data.get("filters", [])
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise FilterConfigError(source, "'filters' must be a list")

        filters = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise FilterConfigError(source, f"filter #{index} must be a mapping")
            filter_type = entry.get("type")
            builder = self._builders.get(filter_type) if isinstance(filter_type, str) else None
            if builder is None:
                raise FilterConfigError(source, f"filter #{index} has unknown type {filter_type!r}")
            try:
                filters.append(builder(entry))
            except FilterConfigError as e:
                raise FilterConfigError(source, f"filter #{index} ({filter_type}) is invalid: {e.reason}") from e
            except (TypeError, ValueError) as e:
                raise FilterConfigError(source, f"filter #{index} ({filter_type}) is invalid: {e}") from e
        logger.debug("Parsed %s parse filters from %s", len(filters), source)
        return filters

    def _bool_option(self, entry: dict, key: str, default: bool) -> bool:
        value = entry.get(key, default)
        if not isinstance(value, bool):
            raise ValueError(f"'{key}' must be true or false, got {value!r}")
        return value

    def _int_option(self, entry: dict, key: str, default: int) -> int:
        value = entry.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{key}' must be an integer, got {value!r}")
        return value

    def _list_option(self, entry: dict, key: str) -> Optional[list]:
        value = entry.get(key)
        if value is not None and not isinstance(value, list):
            raise ValueError(f"'{key}' must be a list, got {value!r}")
        return value

    def _build_default(self, entry: dict) -> ParseFilter:
        return DefaultParseFilter(
            max_parse_size_bytes=self._int_option(entry, "max_parse_size_bytes", self.max_parse_size_bytes),
            parse_robots_txt=self._bool_option(entry, "parse_robots_txt", self.parse_robots_txt),
            parse_sitemap_xml=self._bool_option(entry, "parse_sitemap_xml", self.parse_sitemap_xml),
        )

    def _build_binary_content_type(self, entry: dict) -> ParseFilter:
        prefixes = self._list_option(entry, "extra_binary_prefixes")
        if prefixes is not None and not all(isinstance(p, str) for p in prefixes):
            raise ValueError("'extra_binary_prefixes' entries must be strings")
        return BinaryContentTypeFilter(extra_binary_prefixes=prefixes)

    def _build_url_pattern(self, entry: dict) -> ParseFilter:
        patterns = self._list_option(entry, "patterns")
        if not patterns:
            raise ValueError("'patterns' must be a non-empty list")
        return UrlPatternFilter(patterns, ignore_case=self._bool_option(entry, "ignore_case", False))

    def _build_max_size(self, entry: dict) -> ParseFilter:
        return MaxParseSizeFilter(self._int_option(entry, "max_size_bytes", self.max_parse_size_bytes))

    def _build_status_code(self, entry: dict) -> ParseFilter:
        excluded = self._list_option(entry, "excluded")
        if excluded is not None and any(isinstance(c, bool) or not isinstance(c, int) for c in excluded):
            raise ValueError("'excluded' entries must be integer status codes")
        allowed_range = entry.get("allowed_range")
        if allowed_range is not None:
            if not isinstance(allowed_range, list) or len(allowed_range) != 2:
                raise ValueError("'allowed_range' must be a [low, high] pair")
            if any(isinstance(c, bool) or not isinstance(c, int) for c in allowed_range):
                raise ValueError("'allowed_range' bounds must be integers")
            allowed_range = (allowed_range[0], allowed_range[1])
        return StatusCodeFilter(excluded=excluded, allowed_range=allowed_range)
