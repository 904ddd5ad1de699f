from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from tracker.db.base import Base, new_id, utcnow


class User(Base):
    """
    Account that owns every other entity.

    A user signs in either with a password or through an external identity
    provider, so both `password_hash` and `external_id` are optional.
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=True)
    external_id = Column(String, unique=True, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Deletion cascades are enforced by the foreign keys on the owned tables
    applications = relationship("Application", back_populates="user", passive_deletes=True)
    resources = relationship("Resource", back_populates="user", passive_deletes=True)
    questions = relationship("Question", back_populates="user", passive_deletes=True)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
