"""Seed sample suppliers and products into the configured database.

Creates tables when missing, then inserts the sample data only if the
supplier and product tables are both empty.

Usage:
    python -m scripts.seed_dev_data

Requires: DATABASE_URL (or the SQLite default) in the environment or .env.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run() -> bool:
    from inventory.infrastructure.persistence import database
    from inventory.infrastructure.persistence.seed import seed_sample_data

    await database.create_tables()
    session_factory = database.get_session_factory()
    try:
        async with session_factory() as session:
            async with session.begin():
                seeded = await seed_sample_data(session)
    finally:
        await database.dispose_engine()
    if seeded:
        print("Seed completed.")
    else:
        print("Suppliers or products already present; nothing seeded.", file=sys.stderr)
    return seeded


def main() -> None:
    _load_env()
    asyncio.run(run())


if __name__ == "__main__":
    main()
