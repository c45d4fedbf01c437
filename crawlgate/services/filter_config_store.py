import os
from typing import Optional

import yaml

from crawlgate.exceptions import FilterConfigError


class FilterConfigStore:
    """Filesystem/YAML IO for parse filter config files.

    Responsibility: locate, read, and parse YAML files on disk.
    It does NOT know which filter types exist.
    """

    def __init__(self, *, configs_dir: str = "."):
        self.configs_dir = configs_dir

    def _resolve_path(self, config_path: str) -> str:
        return config_path if os.path.isabs(config_path) else os.path.join(self.configs_dir, config_path)

    def load_yaml_dict(self, config_path: str) -> Optional[dict]:
        """Return parsed YAML dict for `config_path`, or None if the file is missing.

        Unreadable or malformed files raise `FilterConfigError`; a crawl should
        not start with a filter set other than the one asked for.
        """
        full_path = self._resolve_path(config_path)
        if not os.path.isfile(full_path):
            return None
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise FilterConfigError(config_path, f"could not be read: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise FilterConfigError(config_path, "must contain a mapping at the top level")
        return data
