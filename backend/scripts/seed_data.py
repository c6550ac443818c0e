"""Seed the booking collection with random demo bookings.

Uses the store configured through the environment (``STORAGE_BACKEND``,
``MONGODB_CONNECTION_STRING``, ...).

Run from the backend directory:
    python -m scripts.seed_data --count 200 --reset
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from booking_api.config import settings
from booking_api.database import create_store
from booking_api.services.query_engine import BookingQueryEngine


async def seed(count: int, reset: bool = False) -> None:
    """Insert ``count`` random bookings, optionally clearing the collection first."""
    store = create_store(settings)
    try:
        if reset:
            existing = await store.find()
            for document in existing:
                await store.delete_one(document["_id"])
            print(f"🗑️  Removed {len(existing)} existing bookings")

        engine = BookingQueryEngine(store)
        inserted = await engine.generate_random(count)
        print(f"✅ Created {inserted} bookings")

        summary = await engine.dashboard_summary()
        print()
        print("=" * 60)
        print("📊 Seed Summary")
        print("=" * 60)
        print(f"   Total:     {summary.total_bookings}")
        print(f"   Confirmed: {summary.confirmed}")
        print(f"   Pending:   {summary.pending}")
        print(f"   Cancelled: {summary.cancelled}")
        print("=" * 60)
    finally:
        await store.close()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--count", type=int, default=settings.generate_default_count, help="bookings to insert")
    parser.add_argument("--reset", action="store_true", help="delete every booking before seeding")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = _parse_args()
    asyncio.run(seed(args.count, reset=args.reset))
