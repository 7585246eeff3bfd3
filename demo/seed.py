#!/usr/bin/env python3
"""
Demo seed script — populates the database with sample cards for demos.

!! NOT FOR PRODUCTION !!
The card and contact numbers below are fake. This script is intended ONLY
for local demos and frontend development.

Usage (from the repository root, with the project installed via `pip install -e .`):
    # With the API server running on localhost:8000:
    python demo/seed.py

    # Delete the SQLite file named by DATABASE_URL:
    python demo/seed.py --reset

    # Custom server URL:
    python demo/seed.py --base-url http://localhost:9000
"""

import argparse
import asyncio
import os
import random
import sys

import httpx

from app.config import settings
from app.database import sqlite_database_path

BASE_URL = "http://localhost:8000"

# ---------------------------------------------------------------------------
# Demo users
# ---------------------------------------------------------------------------

DEMO_USERS = [
    {"user_id": 1, "name": "Alice Chen", "cards": ["Savings", "Credit"]},
    {"user_id": 2, "name": "Bob Martinez", "cards": ["Savings"]},
    {"user_id": 3, "name": "Carol Nguyen", "cards": ["Savings", "Credit", "Current"]},
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def log(msg: str) -> None:
    print(f"  {msg}")


def random_digits(length: int) -> str:
    return "".join(str(random.randint(0, 9)) for _ in range(length))


def mask(number: str) -> str:
    return f"****{number[-4:]}"


async def create_card(client: httpx.AsyncClient, user_id: int, account_type: str) -> dict:
    """Create a card and return the response body."""
    resp = await client.post(f"{BASE_URL}/api/cards", json={
        "userId": user_id,
        "contactNumber": random_digits(10),
        "cardAccountNumber": random_digits(16),
        "accountType": account_type,
        "initialBalance": f"{random.randint(100_00, 5_000_00) / 100:.2f}",
    })
    if resp.status_code != 201:
        raise RuntimeError(f"Card creation failed ({resp.status_code}): {resp.json()['message']}")
    return resp.json()


async def list_cards(client: httpx.AsyncClient, user_id: int) -> list[dict]:
    resp = await client.get(f"{BASE_URL}/api/cards", params={"userId": user_id})
    resp.raise_for_status()
    return resp.json()


async def seed(base_url: str) -> None:
    global BASE_URL
    BASE_URL = base_url

    print("\n========================================")
    print("  DEMO SEED — NOT FOR PRODUCTION")
    print("========================================\n")

    async with httpx.AsyncClient(timeout=30.0) as client:
        # Health check
        try:
            health = await client.get(f"{BASE_URL}/health")
            health.raise_for_status()
        except (httpx.ConnectError, httpx.HTTPStatusError):
            print(f"  ERROR: Cannot connect to {BASE_URL}")
            print(f"  Start the server first: uvicorn app.main:app --reload\n")
            sys.exit(1)

        for user in DEMO_USERS:
            print(f"Creating cards for {user['name']} (user {user['user_id']})...")
            for account_type in user["cards"]:
                card = await create_card(client, user["user_id"], account_type)
                log(f"{account_type:<8s} {mask(card['cardAccountNumber'])}  "
                    f"balance {card['initialBalance']}")

        # --- Summary ---
        print("\n========================================")
        print("  SEED COMPLETE")
        print("========================================")
        print(f"\n  {'User':<6s} {'Name':<16s} {'Cards'}")
        print(f"  {'─' * 6} {'─' * 16} {'─' * 5}")
        for user in DEMO_USERS:
            cards = await list_cards(client, user["user_id"])
            print(f"  {user['user_id']:<6d} {user['name']:<16s} {len(cards)}")
        print()


def reset_database() -> None:
    """Delete the configured SQLite database file so the server recreates it on restart."""
    db_path = sqlite_database_path(settings.DATABASE_URL)
    if db_path is None:
        print(f"\n  DATABASE_URL is not a SQLite file: {settings.DATABASE_URL}\n")
        return
    db_path = os.path.abspath(db_path)

    if os.path.exists(db_path):
        os.remove(db_path)
        print(f"\n  Deleted {db_path}")
        print("  Restart the server to recreate empty tables.\n")
    else:
        print(f"\n  No database found at {db_path}\n")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Demo seed script — NOT FOR PRODUCTION",
        epilog="Creates sample cards for a few demo users.",
    )
    parser.add_argument(
        "--base-url", default="http://localhost:8000",
        help="Base URL of the running API (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--reset", action="store_true",
        help="Delete the database file and exit (restart server to recreate)",
    )
    args = parser.parse_args()

    if args.reset:
        reset_database()
        return

    await seed(args.base_url)


if __name__ == "__main__":
    asyncio.run(main())
