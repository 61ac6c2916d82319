from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Folder(Base):
    __tablename__ = "folders"

    id = Column(String(36), primary_key=True)
    name = Column(String(200), nullable=False, default="")
    password_hash = Column(String(128), nullable=False)
    # Unix epoch seconds
    created_at = Column(Integer, nullable=False)
    expires_at = Column(Integer, nullable=False)
