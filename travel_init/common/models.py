"""Pydantic models: user document stored in the users collection."""

from pydantic import BaseModel, ConfigDict, Field


# -------------------- USER DOCUMENT -------------------- #

def user_key(username: str) -> str:
    """Return the document id for a username ("user::<username>")."""
    return f"user::{username}"


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")    # "user::<username>"
    username: str
    password: str                   # bcrypt hash, never plaintext
    name: str                       # display name
    type: str = "user"

    def to_document(self) -> dict:
        """Return the Mongo document with `_id` as the key."""
        return self.model_dump(by_alias=True)
