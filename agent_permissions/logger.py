import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


class Logger:
    """Centralized logging setup with Rich"""

    @staticmethod
    def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
        """Setup logging configuration with Rich handler"""
        handlers = [RichHandler(console=Console(stderr=True), rich_tracebacks=True)]

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

        # Clear existing handlers
        logging.getLogger().handlers.clear()

        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format="%(message)s",
            datefmt="[%X]",
            handlers=handlers,
        )
        return logging.getLogger("agent_permissions")
