from typing import Optional

import bcrypt
from sqlmodel import Field

from tasklist.core.constants import PASSWORD_MAX_BYTES
from tasklist.models.base import BaseModel


#
# User Model
#
class User(BaseModel, table=True):
    """
    Represents a registered user in the system
    """
    __tablename__ = "users"

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Email must be unique and indexed for fast lookups during login
    email: str = Field(unique=True, index=True)

    name: Optional[str] = Field(default=None, max_length=100)

    # Never store plain text passwords. we store the Bcrypt hash.
    hashed_password: str

    def verify_password(self, password: str) -> bool:
        """
        Verifies a raw password against the stored hash.
        A password too long to have been hashed never matches.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > PASSWORD_MAX_BYTES:
            return False
        return bcrypt.checkpw(encoded, self.hashed_password.encode("utf-8"))

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Generates a secure Bcrypt hash/salt for a new password.

        Raises:
            ValueError: if the password is longer than PASSWORD_MAX_BYTES once encoded
        """
        encoded = password.encode("utf-8")
        if len(encoded) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(encoded, salt).decode("utf-8")
