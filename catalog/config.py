import logging
import os
from pathlib import Path

from rich.logging import RichHandler

# Settings shared by the three servers.

PORT = 3000
HOST = "0.0.0.0"

DATA_FILE = Path(os.getenv(
    "CATALOG_DATA_FILE",
    Path(__file__).resolve().parent / "data" / "products.json",
))
LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
