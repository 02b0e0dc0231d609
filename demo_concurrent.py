import asyncio
from sdk.catalogclient import CatalogClient, CatalogAPIError

async def simulate_create(client, n):
    try:
        product = await client.create_product_async(f"Sticker #{n}", 1.5, "Vinyl sticker", "misc")
        print(f"✅ request {n} got id {product['id']}")
        return product["id"]
    except CatalogAPIError as e:
        print(f"❌ request {n} failed: {e}")
        return None

async def main():
    c = CatalogClient(base_url="http://127.0.0.1:3000")

    print("⚡ Creating 10 products concurrently...")
    ids = await asyncio.gather(*(simulate_create(c, n) for n in range(10)))
    ids = [i for i in ids if i is not None]

    if len(ids) == len(set(ids)):
        print(f"\n📦 All {len(ids)} ids are unique: {sorted(ids)}")
    else:
        print(f"\n⚠️  Duplicate ids assigned: {sorted(ids)}")

    # clean up
    for pid in ids:
        c.delete_product(pid)

if __name__ == "__main__":
    asyncio.run(main())
