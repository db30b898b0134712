from __future__ import annotations

# Требуемые сторонние библиотеки: python-dateutil, python-dotenv, jinja2, Babel

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CLIENT_FILE = "client_Ivan.txt"


@dataclass
class Config:
    client_file: Path
    log_level: int


def load_config() -> Config:
    load_dotenv()
    client_file = Path(os.getenv("CLIENT_FILE") or DEFAULT_CLIENT_FILE)

    level_name = (os.getenv("LOG_LEVEL") or "INFO").upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise RuntimeError(f"Unknown LOG_LEVEL value: {level_name}")

    return Config(client_file=client_file, log_level=log_level)
