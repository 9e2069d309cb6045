from sqlalchemy import Column, Integer, String, DateTime, text

from src.config.database import Base

class HubspotCredential(Base):
    __tablename__ = 'hubspot_credential'

    id = Column(Integer, primary_key=True, autoincrement=True)
    hub_id = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(String(64))
    app_id = Column(String(64))
    user = Column(String(255))
    access_token = Column(String(512), nullable=False)
    refresh_token = Column(String(512), nullable=False)
    expire_time = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text('CURRENT_TIMESTAMP'),
        onupdate=text('CURRENT_TIMESTAMP'),
    )
