import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import CatalogIOError, CatalogParseError

# Backing stores for the product catalog. Every call goes to the backing
# itself; nothing is cached between requests.

logger = logging.getLogger(__name__)

Product = Dict[str, Any]


class CatalogStore:
    def __init__(self):
        # serializes read-modify-write cycles inside this process
        self.lock = threading.RLock()

    def read_all(self) -> List[Product]:
        raise NotImplementedError

    def write_all(self, products: List[Product]) -> None:
        raise NotImplementedError


class JsonFileStore(CatalogStore):
    """The whole catalog as one pretty-printed JSON array in a single file."""

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)

    def read_all(self) -> List[Product]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogIOError(f"Could not read catalog file {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise CatalogParseError(f"Catalog file {self.path} is not valid UTF-8: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CatalogParseError(f"Catalog file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise CatalogParseError(f"Catalog file {self.path} must hold a JSON array")

        logger.debug("Read %d products from %s", len(data), self.path)
        return data

    def write_all(self, products: List[Product]) -> None:
        # overwritten in place, no temp file + rename
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(products, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise CatalogIOError(f"Could not write catalog file {self.path}: {e}") from e
        logger.debug("Wrote %d products to %s", len(products), self.path)

    def __repr__(self):
        return f"JsonFileStore({str(self.path)!r})"


class MemoryStore(CatalogStore):
    def __init__(self, products: Optional[List[Product]] = None):
        super().__init__()
        self._products: List[Product] = copy.deepcopy(products or [])

    def read_all(self) -> List[Product]:
        return copy.deepcopy(self._products)

    def write_all(self, products: List[Product]) -> None:
        self._products = copy.deepcopy(products)
