from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)


def parse_extensions(value: str) -> list[str]:
    return [part.strip().lstrip(".").lower() for part in value.split(",") if part.strip().lstrip(".")]


SCAN_EXTENSIONS = parse_extensions(os.getenv("SANGER_RENAME_EXTENSIONS", "ab1"))
LOG_LEVEL = os.getenv("SANGER_RENAME_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("SANGER_RENAME_LOG_FILE", "")
DEFAULT_VENDOR = os.getenv("SANGER_RENAME_VENDOR", "")
