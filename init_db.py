#!/usr/bin/env python3
"""
Initialize the travel-sample MongoDB database and create the admin user.
Runs once when the database container starts; safe to run again.
"""

from dotenv import load_dotenv
from travel_init.storage.db import (
    COLLECTIONS, DATABASE_NAME, get_client, get_database,
    init_collections, create_admin, collection_counts,
)

COMPLETION_MESSAGE = "MongoDB collections and seed data created successfully"


def main(client=None):
    # Load environment variables from .env file if it exists
    load_dotenv()

    owns_client = client is None
    if owns_client:
        client = get_client()

    try:
        db = get_database(client)
        print(f"Initializing database '{DATABASE_NAME}'...")

        created = init_collections(db)
        for name in COLLECTIONS:
            if name in created:
                print(f"✓ Collection '{name}' created")
            else:
                print(f"⚠ Collection '{name}' already exists (this is OK)")

        print("\nCreating admin user...")
        if create_admin(db):
            print("✓ User 'admin' created successfully")
        else:
            print("⚠ User 'admin' already exists (this is OK)")

        print()
        for name, count in collection_counts(db).items():
            print(f"  {name}: {count} document(s)")
    finally:
        if owns_client:
            client.close()

    print(COMPLETION_MESSAGE)


if __name__ == "__main__":
    main()
