from sqlalchemy import Column, Integer, String, Text, ForeignKey
from app.core.database import Base


class Message(Base):
    __tablename__ = "messages"

    id = Column(String(36), primary_key=True)
    folder_id = Column(String(36), ForeignKey("folders.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(Integer, nullable=False)
    updated_at = Column(Integer, nullable=False)
