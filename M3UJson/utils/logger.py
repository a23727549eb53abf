# 19.10.26

import logging


# External library
from rich.console import Console
from rich.logging import RichHandler


# Internal utilities
from .config_json import config_manager


class Logger:
    _configured = False

    def __init__(self, debug: bool = None, log_file: str = None):
        """
        Configure the root logger once per process.

        Parameters:
            debug (bool): Force DEBUG level, defaults to DEFAULT.debug.
            log_file (str): Also write records to this file, defaults to DEFAULT.log_file.
        """
        if debug is None:
            debug = config_manager.config.get_bool('DEFAULT', 'debug')
        if log_file is None:
            log_file = config_manager.config.get('DEFAULT', 'log_file', default="")

        self.level = logging.DEBUG if debug else logging.INFO
        self.log_file = log_file

        if not Logger._configured:
            self._setup()
            Logger._configured = True
        else:
            logging.getLogger().setLevel(self.level)

    def _setup(self) -> None:
        root = logging.getLogger()
        root.setLevel(self.level)

        console_handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False, markup=False)
        console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(console_handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
            root.addHandler(file_handler)
