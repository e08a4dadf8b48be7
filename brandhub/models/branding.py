"""Branding model definitions."""

from sqlalchemy import Column, Integer, String
from brandhub.database import Base


class Branding(Base):
    """Represents a brand entry with an uploaded image."""
    __tablename__ = "branding"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    category = Column(String)
    image = Column(String)  # path under UPLOAD_DIR

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "image": self.image,
        }
