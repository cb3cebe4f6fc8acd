from typing import Iterable, List, Optional, Set

from sqlalchemy.orm import Session

from quizhub.models.user import User


class UserRepository:
    """Repository for User database operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_existing_emails(self, emails: Iterable[str]) -> Set[str]:
        """Return the subset of emails already registered"""
        emails = set(emails)
        if not emails:
            return set()
        rows = self.db.query(User.email).filter(User.email.in_(emails)).all()
        return {row[0] for row in rows}

    def get_all(self) -> List[User]:
        """Get all users, most recently joined first"""
        return self.db.query(User).order_by(User.joined_on.desc()).all()

    def create_bulk(self, user_data_list: List[dict]) -> List[User]:
        """Create multiple users in one commit"""
        db_users = [User(**data) for data in user_data_list]
        self.db.add_all(db_users)
        self.db.commit()
        for user in db_users:
            self.db.refresh(user)
        return db_users

    def delete(self, user: User) -> bool:
        """Delete a user"""
        self.db.delete(user)
        self.db.commit()
        return True
