"""Configuration: data directory and download mirror from environment."""

import os
from pathlib import Path

# Same variable name the reference distribution's test programs read.
DATA_DIR_ENV = "VSOP87"
BASE_URL_ENV = "VSOP87_BASE_URL"

DEFAULT_DATA_DIR = "./data/vsop87"
# CDS copy of catalogue VI/81 (Bretagnon & Francou 1988).
DEFAULT_BASE_URL = "https://cdsarc.cds.unistra.fr/ftp/VI/81/"

CHECK_FILE_NAME = "vsop87.chk"


def get_data_dir() -> Path:
    """Return the coefficient file directory (VSOP87 env var or default)."""
    return Path(os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR))


def get_base_url() -> str:
    """Return the mirror URL used for downloads, always ending in a slash.

    Returns:
        URL string (VSOP87_BASE_URL env var or the CDS mirror).
    """
    url = os.environ.get(BASE_URL_ENV, "").strip() or DEFAULT_BASE_URL
    if not url.endswith("/"):
        url += "/"
    return url
