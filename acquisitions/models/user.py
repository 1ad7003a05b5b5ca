"""ORM model for application users (sign-up / sign-in)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from acquisitions.models.base import Base


class User(Base):
    """
    User account for cookie-based JWT authentication.

    role: 'admin' or 'user'. The password hash lives in the ``password`` column
    and must never leave the repository/service boundary.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    email = Column(String(256), nullable=False, unique=True)
    password_hash = Column("password", String(512), nullable=False)
    role = Column(String(50), nullable=False, default="user", server_default="user")
    created_at = Column(
        "create_at",
        DateTime(),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        "update_at",
        DateTime(),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
