"""User model definitions."""

from sqlalchemy import Column, Integer, String
from brandhub.database import Base


class User(Base):
    """Represents an application user.

    ``password`` holds a bcrypt hash and stays empty for users created
    directly through ``POST /users``.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    email = Column(String, unique=True, index=True)
    password = Column(String)
    address = Column(String)

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "address": self.address,
        }
