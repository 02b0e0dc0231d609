#!/usr/bin/env python
from sdk.catalogclient import CatalogClient, CatalogAPIError

def main():
    c = CatalogClient(base_url="http://127.0.0.1:3000")

    # -----------------------------
    # List products
    # -----------------------------
    print("Listing products...")
    print(c.list_products())

    # -----------------------------
    # Create a product
    # -----------------------------
    print("\nCreating product...")
    created = c.create_product("USB-C Hub", 39.99, "Seven ports, 100 W passthrough", "electronics")
    print(created)
    pid = created["id"]

    # -----------------------------
    # Fetch it back
    # -----------------------------
    print(f"\nFetching product {pid}...")
    print(c.get_product(pid))

    # -----------------------------
    # Update it (the id in the body is ignored)
    # -----------------------------
    print(f"\nUpdating product {pid}...")
    print(c.update_product(pid, price=34.99, inStock=False, id=9999))

    # -----------------------------
    # Delete it
    # -----------------------------
    print(f"\nDeleting product {pid}...")
    print(c.delete_product(pid))

    try:
        c.get_product(pid)
    except CatalogAPIError as e:
        print(f"\nAfter delete: {e}")

if __name__ == "__main__":
    main()
