# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

import logging
import re
from pathlib import Path
from typing import Optional


class SensitiveDataFilter(logging.Filter):
    """Filter to mask credentials in log messages"""

    PATTERNS = {
        "password": re.compile(r"((?:password|passwd|pwd|token|secret)\s*[=:]\s*)[^\s&;,]+", re.IGNORECASE),
        "userinfo": re.compile(r"(://[^:/?#@\s]*:)[^@/?#\s]+(@)"),
    }

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()

        # Mask key/value credentials
        message = self.PATTERNS["password"].sub(r"\1[MASKED_CREDENTIAL]", message)

        # Mask the password part of user:password@host
        message = self.PATTERNS["userinfo"].sub(r"\1[MASKED_CREDENTIAL]\2", message)

        record.msg = message
        record.args = ()
        return True


def setup_logging(
    log_level: str = "INFO",
    mask_sensitive: bool = True,
    log_file: Optional[Path] = None,
):
    """Setup logging with optional sensitive data filtering"""

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers to avoid duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        if mask_sensitive:
            handler.addFilter(SensitiveDataFilter())
        root_logger.addHandler(handler)

    if mask_sensitive:
        # Avoid adding filter if it already exists
        if not any(isinstance(f, SensitiveDataFilter) for f in root_logger.filters):
            root_logger.addFilter(SensitiveDataFilter())
