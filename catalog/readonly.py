import logging

from fastapi import Depends, FastAPI, HTTPException

from .config import DATA_FILE
from .service import list_products_logic
from .serving import serve
from .store import CatalogStore, JsonFileStore
from .web import build_app, get_store

# Read-only variant: the catalog file is served as is, nothing else.

logger = logging.getLogger(__name__)


def create_app(store: CatalogStore) -> FastAPI:
    app = build_app("catalog-servers (read-only)", store)

    @app.get("/products")
    def list_products(store: CatalogStore = Depends(get_store)):
        try:
            return list_products_logic(store)
        except Exception:
            logger.exception("Error reading products data")
            raise HTTPException(status_code=500, detail="Failed to retrieve products data")

    return app

app = create_app(JsonFileStore(DATA_FILE))

def main():
    serve(app, "Read-only server", ["Access products data at http://localhost:3000/products"])

if __name__ == "__main__":
    main()
