"""
User model

Username is the login identifier; the password is only ever stored hashed.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text

from attire.core.database import Base
from attire.core.utils import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    # Profile
    name = Column(String)
    email = Column(String)
    address = Column(Text)
    phone = Column(String)

    created_at = Column(DateTime(timezone=True), default=utcnow)
