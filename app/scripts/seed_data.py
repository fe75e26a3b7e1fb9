# app/scripts/seed_data.py
# Usage: python -m app.scripts.seed_data <user_id>
import asyncio
import logging
import sys
from app.core.db import init_db, close_db
from app.services.seed_service import seed_demo_products

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


async def main(user_id: str):
    await init_db()
    try:
        result = await seed_demo_products(user_id)
        print(f"{result['message']}: {result['count']} products in inventory {result['inventory_id']}")
    finally:
        await close_db()

if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python -m app.scripts.seed_data <user_id>")
    asyncio.run(main(sys.argv[1]))
