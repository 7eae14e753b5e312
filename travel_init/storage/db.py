"""MongoDB travel-sample collections + seed admin user (bcrypt hashes)."""

import os
from typing import Optional

import bcrypt
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import CollectionInvalid, DuplicateKeyError

from travel_init.common.models import User, user_key


DATABASE_NAME = "travel-sample"

COLLECTIONS = ("users", "hotel", "airport", "flightpath", "bookings")

# Development fixture only: bcrypt hash carried over from the original init
# script. Its plaintext is unconfirmed.
ADMIN_USER = User(
    id=user_key("admin"),
    username="admin",
    password="$2a$10$KOt5c1kcKU3Xx6YAkgKV8eZkKMwqBBCv9D/NIvs37aWjTvTCp6oo.",
    name="Administrator",
    type="user",
)


# -------------------- CONNECTION HELPERS -------------------- #

def get_client() -> MongoClient:
    """
    Create a MongoDB client using environment variables.
    Pings the server so an unreachable database fails here with ConnectionFailure.
    """
    client = MongoClient(
        host=os.getenv("MONGO_HOST", "127.0.0.1"),
        port=int(os.getenv("MONGO_PORT", 27017)),
        username=os.getenv("MONGO_USER") or None,
        password=os.getenv("MONGO_PASS") or None,
        serverSelectionTimeoutMS=int(os.getenv("MONGO_TIMEOUT_MS", 5000)),
    )
    client.admin.command("ping")
    return client


def get_database(client: MongoClient) -> Database:
    """Select the travel-sample database (created lazily on first write)."""
    return client[DATABASE_NAME]


# -------------------- COLLECTIONS -------------------- #

def create_collection(db: Database, name: str) -> bool:
    """Create a collection if absent. Returns False when it already exists."""
    if name in db.list_collection_names():
        return False
    try:
        db.create_collection(name)
    except CollectionInvalid:
        # created by someone else between the check and the create
        return False
    return True


def init_collections(db: Database) -> list:
    """Create every travel-sample collection; return the names actually created."""
    return [name for name in COLLECTIONS if create_collection(db, name)]


def collection_counts(db: Database) -> dict:
    """Return {collection name: document count} for the fixed collections."""
    return {name: db[name].count_documents({}) for name in COLLECTIONS}


# -------------------- PASSWORD HASHING (bcrypt) -------------------- #

def hash_password(password: str) -> str:
    """Return a bcrypt hash of password with a freshly generated salt."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(user_record: dict, provided_password: str) -> bool:
    """Check a plaintext password against the stored bcrypt hash."""
    return bcrypt.checkpw(provided_password.encode(), user_record["password"].encode())


# -------------------- USER MANAGEMENT -------------------- #

def create_user(db: Database, user: User) -> bool:
    """
    Insert a user document keyed by its fixed `_id`.
    Returns False if a document with that id already exists; the stored
    record is left untouched.
    """
    try:
        db["users"].insert_one(user.to_document())
        return True
    except DuplicateKeyError:
        return False


def create_admin(db: Database) -> bool:
    """Insert the seed administrator record."""
    return create_user(db, ADMIN_USER)


def get_user(db: Database, username: str) -> Optional[dict]:
    """Return user record or None."""
    return db["users"].find_one({"username": username})
