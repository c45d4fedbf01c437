import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

loaded = load_dotenv()
if not loaded and Path(".env").exists():
    raise RuntimeError(".env file present but failed to load")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_optional_str_env(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw


def get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except Exception:
        logging.exception("Invalid %s: %r", name, raw)
        return default


def get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logging.warning("Invalid %s: %r; using %s", name, raw, default)
    return default


DEFAULT_MAX_PARSE_SIZE_BYTES = 2 * 1024 * 1024


def max_parse_size_bytes() -> int:
    return get_int_env("CRAWLGATE_MAX_PARSE_SIZE_BYTES", DEFAULT_MAX_PARSE_SIZE_BYTES)


def parse_robots_txt() -> bool:
    return get_bool_env("CRAWLGATE_PARSE_ROBOTS_TXT", True)


def parse_sitemap_xml() -> bool:
    return get_bool_env("CRAWLGATE_PARSE_SITEMAP_XML", True)


def filters_file() -> Optional[str]:
    return get_optional_str_env("CRAWLGATE_FILTERS_FILE")
