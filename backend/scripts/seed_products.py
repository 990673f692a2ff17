#!/usr/bin/env python3
"""
Create or rebuild the products schema and optionally import extra products
from a JSON file.

The schema step is the same migration the API runs at startup: it is a no-op
when the model has not changed, unless --reset is given.

Usage:
    python scripts/seed_products.py
    python scripts/seed_products.py --reset --file products.json
"""
import argparse
import json
import logging
import os
import sys
from decimal import Decimal

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from products_api.db import SessionLocal, engine
from products_api.db.migrations import migrate
from products_api.repositories.commands import InsertCommand, UpdateCommand
from products_api.repositories.product_repo import ProductRepository

log = logging.getLogger("products_api.seed")


def _normalize_entry(entry):
    """Return a dict with keys: id, product_name, unit_price"""
    product_id = entry.get("id")
    name = entry.get("productName", entry.get("product_name"))
    raw_price = entry.get("unitPrice", entry.get("unit_price", 0))
    return {
        "id": int(product_id) if product_id is not None else None,
        "product_name": name,
        "unit_price": Decimal(str(raw_price or 0)),
    }


def load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and isinstance(data.get("items"), list):
        data = data["items"]
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of products in {path}")
    return [_normalize_entry(e) for e in data]


def import_products(entries) -> int:
    """Insert new ids and overwrite existing ones, all in one commit."""
    db = SessionLocal()
    try:
        repo = ProductRepository(db)
        commands = []
        for ent in entries:
            if ent["id"] is not None and repo.get_by_id(ent["id"]) is not None:
                commands.append(UpdateCommand(**ent))
            else:
                commands.append(InsertCommand(**ent))
        repo.execute(*commands)
        return len(commands)
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--reset", action="store_true", help="Drop, recreate and reseed even if the model is unchanged")
    parser.add_argument("--file", "-f", default=None, help="Path to a JSON list of products to import after seeding")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    rebuilt = migrate(engine, reset=args.reset)
    log.info("Schema %s.", "rebuilt and seeded" if rebuilt else "already up to date")

    if args.file:
        if not os.path.exists(args.file):
            log.error("File not found: %s", args.file)
            return 1
        count = import_products(load_entries(args.file))
        log.info("Imported products: %d", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
