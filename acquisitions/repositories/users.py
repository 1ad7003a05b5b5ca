"""Credential store: lookups and inserts on the users table."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from acquisitions.models import User


class DuplicateEmailError(Exception):
    """Raised when an insert violates the unique email constraint."""

    def __init__(self, email: str) -> None:
        self.email = email
        self.message = f"Email already stored: {email}"
        super().__init__(self.message)


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def insert_user(
    db: Session,
    *,
    name: str,
    email: str,
    password_hash: str,
    role: str = "user",
) -> User:
    """
    Insert and commit a new user, returning the refreshed row.

    A concurrent insert of the same email loses at the unique constraint and
    is raised as DuplicateEmailError; any other database error propagates.
    """
    user = User(name=name, email=email, password_hash=password_hash, role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmailError(email) from e
    db.refresh(user)
    return user
