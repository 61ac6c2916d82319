from sqlalchemy import Column, Integer, String
from app.core.database import Base


class ShareToken(Base):
    __tablename__ = "share_tokens"

    token = Column(String(64), primary_key=True)
    # Plain reference, not a foreign key: a token may outlive its swept folder
    folder_id = Column(String(36), nullable=False, index=True)
    expires_at = Column(Integer, nullable=False)
