"""Shared configuration for the Markdown verification helpers."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Encoding used to read generated documents (None -> platform default)
ENCODING = os.getenv("MD_VERIFY_ENCODING") or None

# Level for logging.basicConfig in module entry points
LOG_LEVEL = os.getenv("MD_VERIFY_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
