"""
Category model
"""
from sqlalchemy import Column, Integer, String, Text

from attire.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    image = Column(String)
    description = Column(Text)
