# 19.10.26

from .config_json import config_manager
from .console import start_message
from .logger import Logger

__all__ = [
    "config_manager",
    "start_message",
    "Logger"
]
