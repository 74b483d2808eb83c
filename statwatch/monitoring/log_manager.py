import sys
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional


class LogManager:
    """Diagnostic logging setup: stderr console plus an optional dated file.

    Operator output goes to stdout through ConsoleReporter; nothing here
    writes to stdout.
    """

    def __init__(self, log_level: str = "WARNING", log_dir: Optional[str] = None):
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file: Optional[Path] = None

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Install handlers on the root logger"""
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        level = getattr(logging, log_level.upper(), logging.WARNING)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear existing handlers
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self.log_dir / f"statwatch_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            root_logger.addHandler(file_handler)
            # file gets everything, console keeps the configured level
            root_logger.setLevel(logging.DEBUG)

    def close(self):
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            handler.close()
            root_logger.removeHandler(handler)
