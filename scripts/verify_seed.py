#!/usr/bin/env python3
"""
Check an initialized travel-sample database.
Verifies collections, document counts and the development admin credential.
"""

import sys
import os
# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
from travel_init.storage.db import (
    COLLECTIONS, DATABASE_NAME, get_client, get_database,
    collection_counts, get_user, verify_password,
)

ADMIN_USERNAME = "admin"
ADMIN_DEV_PASSWORD = "password"


def verify_seed(db):
    """Run every check against db; return True if all pass."""
    ok = True

    existing = set(db.list_collection_names())
    for name in COLLECTIONS:
        if name in existing:
            print(f"✓ Collection '{name}' present")
        else:
            print(f"❌ Collection '{name}' missing")
            ok = False

    counts = collection_counts(db)
    if counts["users"] != 1:
        print(f"❌ Expected 1 user document, found {counts['users']}")
        ok = False
    for name in COLLECTIONS[1:]:
        if counts[name] != 0:
            print(f"❌ Expected '{name}' to be empty, found {counts[name]} document(s)")
            ok = False

    user = get_user(db, ADMIN_USERNAME)
    if user is None:
        print(f"❌ User '{ADMIN_USERNAME}' not found")
        return False

    if user["password"] == ADMIN_DEV_PASSWORD:
        print("❌ Admin password stored as plaintext")
        return False

    try:
        accepted = verify_password(user, ADMIN_DEV_PASSWORD)
    except ValueError:
        print("❌ Admin password is not a bcrypt hash")
        return False

    if accepted:
        print(f"✓ User '{ADMIN_USERNAME}' accepts the development password")
    else:
        print(f"⚠ User '{ADMIN_USERNAME}' does not accept the development password")

    return ok


def main():
    load_dotenv()

    print("=" * 60)
    print(f"Verifying database '{DATABASE_NAME}'")
    print("=" * 60)

    client = get_client()
    try:
        ok = verify_seed(get_database(client))
    finally:
        client.close()

    print("=" * 60)
    print("✓ Verification passed" if ok else "❌ Verification failed")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
