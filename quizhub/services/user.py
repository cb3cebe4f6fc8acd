import logging
from datetime import datetime, timezone
from typing import Any, List

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quizhub.core.database import utcnow
from quizhub.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from quizhub.repositories.user_repository import UserRepository
from quizhub.schemas.user import UserCreate, UserDeleteResponse, UserResponse

logger = logging.getLogger(__name__)


def _has_name_and_email(entry: Any) -> bool:
    if not isinstance(entry, dict):
        return False
    return bool(str(entry.get("name") or "").strip()) and bool(entry.get("email"))


def _as_utc(value: datetime) -> datetime:
    """Aware datetimes are converted to UTC; naive ones are taken as UTC already"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def normalize_user_payload(payload: Any) -> List[Any]:
    """Accept a single user, a list of users, or {"data": [...]}"""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return payload["data"]
    return [payload]


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def list_users(self) -> List[UserResponse]:
        return [UserResponse.model_validate(u) for u in self.repository.get_all()]

    def create_users(self, payload: Any) -> List[UserResponse]:
        """
        Insert every entry that has both a name and an email.

        Entries whose email is already registered (or repeated earlier in
        the same batch) are skipped while the rest are saved; a
        ConflictError is raised afterwards if anything was skipped.
        """
        entries = normalize_user_payload(payload)
        valid = [e for e in entries if _has_name_and_email(e)]
        if not valid:
            raise InvalidInputError("Name and email are required")

        try:
            users = [UserCreate.model_validate(e) for e in valid]
        except ValidationError as e:
            raise InvalidInputError(f"Invalid user data: {e.errors()[0]['msg']}")

        existing = self.repository.get_existing_emails(u.email for u in users)
        seen = set(existing)
        to_insert = []
        rejected = []
        for user in users:
            if user.email in seen:
                rejected.append(user.email)
                continue
            seen.add(user.email)
            to_insert.append(
                {
                    "name": user.name.strip(),
                    "email": user.email,
                    "joined_on": _as_utc(user.joined_on) if user.joined_on else utcnow(),
                }
            )

        saved = []
        if to_insert:
            try:
                saved = self.repository.create_bulk(to_insert)
            except IntegrityError:
                self.db.rollback()
                raise ConflictError("Email already used")

        if rejected:
            logger.warning(f"Skipped users with emails already in use: {rejected}")
            raise ConflictError("Email already used")

        logger.info(f"Created {len(saved)} user(s)")
        return [UserResponse.model_validate(u) for u in saved]

    def delete_user(self, user_id: str) -> UserDeleteResponse:
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        snapshot = UserResponse.model_validate(user)
        self.repository.delete(user)
        return UserDeleteResponse(message="User deleted", user=snapshot)
