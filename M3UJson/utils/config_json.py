# 19.10.26

import os
import copy
import json
import logging
from typing import Any, Dict, List, Optional


# Variable
logger = logging.getLogger(__name__)
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG = {
    "DEFAULT": {
        "debug": False,
        "log_file": "",
        "show_message": True,
        "show_trace": False
    },
    "OUTPUT": {
        "path": "output.json",
        "indent": 2,
        "ensure_ascii": False
    },
    "EXTRACT": {
        "max_workers": 1,
        "default_user_agent": "Mozilla/5.0 (Linux; Android 10; BRAVIA 4K VH2 Build/QTG3.200305.006.S292; wv)"
    },
    "REQUESTS": {
        "timeout": 15,
        "verify": True,
        "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/136.0.0.0 Safari/537.36"
    }
}


class ConfigSection:
    def __init__(self, data: Dict[str, Dict[str, Any]]):
        self._data = data

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Return a raw value, or default when the section or key is missing."""
        return self._data.get(section, {}).get(key, default)

    def get_bool(self, section: str, key: str, default: bool = False) -> bool:
        value = self.get(section, key, default)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)

    def get_int(self, section: str, key: str, default: int = 0) -> int:
        value = self.get(section, key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid integer for {section}.{key}: {value!r}, using {default}")
            return default

    def get_list(self, section: str, key: str, default: Optional[List[Any]] = None) -> List[Any]:
        value = self.get(section, key, default)
        if value is None:
            return []
        if isinstance(value, str):
            return [v.strip() for v in value.split(',') if v.strip()]
        return list(value)

    def get_dict(self, section: str, key: str, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        value = self.get(section, key, default)
        return dict(value) if isinstance(value, dict) else {}

    def set(self, section: str, key: str, value: Any) -> None:
        self._data.setdefault(section, {})[key] = value

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return copy.deepcopy(self._data)


class ConfigManager:
    def __init__(self, file_path: Optional[str] = None):
        """
        Load built-in defaults and merge the user configuration on top.

        Parameters:
            file_path (str): Explicit config.json path. When omitted the current
                directory is searched first, then the project root.
        """
        self.file_path = file_path or self._find_config_file()
        self.config = ConfigSection(self._load())

    @staticmethod
    def _find_config_file() -> Optional[str]:
        candidates = [
            os.path.join(os.getcwd(), CONFIG_FILENAME),
            os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), CONFIG_FILENAME)
        ]
        for path in candidates:
            if os.path.isfile(path):
                return path
        return None

    def _load(self) -> Dict[str, Dict[str, Any]]:
        data = copy.deepcopy(DEFAULT_CONFIG)
        if not self.file_path:
            return data

        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot read config file {self.file_path}: {e}")
            return data

        for section, values in user_config.items():
            if isinstance(values, dict):
                data.setdefault(section, {}).update(values)

        return data

    def reload(self) -> None:
        self.config = ConfigSection(self._load())


config_manager = ConfigManager()
