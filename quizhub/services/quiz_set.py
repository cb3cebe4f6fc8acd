import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quizhub.core.exceptions import InvalidInputError, NotFoundError
from quizhub.domain.identifiers import looks_like_object_id
from quizhub.models.quiz_set import QuizSet
from quizhub.repositories.set_repository import SetRepository
from quizhub.schemas.quiz_set import (
    MessageResponse,
    SetCreate,
    SetDeleteResponse,
    SetMessageResponse,
    SetResponse,
    SetUpdate,
)

logger = logging.getLogger(__name__)


class SetService:
    """Set registry: naming rules and the single-active-set invariant"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = SetRepository(db)

    def get_set(self, set_id: str) -> QuizSet:
        """Fetch a set by ID or raise NotFoundError"""
        quiz_set = self.repository.get_by_id(set_id)
        if quiz_set is None:
            raise NotFoundError("Set not found")
        return quiz_set

    def resolve_reference(self, reference: str, missing_hint: str = "") -> QuizSet:
        """
        Resolve a client-supplied set reference.

        A 24-character hex string is looked up as a set ID, anything else
        as an exact set name. Unknown references are input errors (400),
        not lookups of the request path, so InvalidInputError is raised.
        """
        if looks_like_object_id(reference):
            quiz_set = self.repository.get_by_id(reference)
            if quiz_set is None:
                raise InvalidInputError(f'Set with ID "{reference}" not found.')
            return quiz_set

        quiz_set = self.repository.get_by_name(reference)
        if quiz_set is None:
            message = f'Set "{reference}" not found.'
            if missing_hint:
                message = f"{message} {missing_hint}"
            raise InvalidInputError(message)
        return quiz_set

    def list_sets(self) -> List[SetResponse]:
        return [SetResponse.model_validate(s) for s in self.repository.get_all()]

    def get_active_set(self) -> SetResponse:
        active = self.repository.get_active()
        if active is None:
            raise NotFoundError("No active set found")
        return SetResponse.model_validate(active)

    def create_sets(self, payload: List[SetCreate]) -> List[SetResponse]:
        """Create one or more inactive sets; the batch is all-or-nothing"""
        if any(not item.name or not item.name.strip() for item in payload):
            raise InvalidInputError("Each set must have a name")

        names = [item.name.strip() for item in payload]

        duplicates = [s.name for s in self.repository.get_by_names(names)]
        seen = set()
        for name in names:
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            logger.warning(f"Rejected set batch with duplicate names: {duplicates}")
            raise InvalidInputError(f"Duplicate set names: {', '.join(duplicates)}")

        try:
            created = self.repository.create_bulk(names)
        except IntegrityError:
            self.db.rollback()
            raise InvalidInputError(f"Duplicate set names: {', '.join(names)}")

        logger.info(f"Created {len(created)} set(s): {names}")
        return [SetResponse.model_validate(s) for s in created]

    def rename_set(self, set_id: str, payload: SetUpdate) -> SetMessageResponse:
        if not payload.name or not payload.name.strip():
            raise InvalidInputError("Set name is required")
        name = payload.name.strip()

        quiz_set = self.get_set(set_id)
        if self.repository.name_taken_by_other(name, set_id):
            raise InvalidInputError("A set with this name already exists")

        updated = self.repository.rename(quiz_set, name)
        return SetMessageResponse(message="Set updated", set=SetResponse.model_validate(updated))

    def activate_set(self, set_id: str) -> SetMessageResponse:
        """Make set_id the only active set"""
        quiz_set = self.get_set(set_id)
        activated = self.repository.activate(quiz_set)
        logger.info(f"Activated set {activated.id} ({activated.name})")
        return SetMessageResponse(
            message="Set activated successfully",
            set=SetResponse.model_validate(activated),
        )

    def deactivate_all(self) -> MessageResponse:
        count = self.repository.deactivate_all()
        logger.info(f"Deactivated all sets ({count} were active)")
        return MessageResponse(message="All sets deactivated successfully")

    def delete_set(self, set_id: str) -> SetDeleteResponse:
        """Delete a set; its questions are left in place"""
        quiz_set = self.get_set(set_id)
        snapshot = SetResponse.model_validate(quiz_set)
        self.repository.delete(quiz_set)
        logger.info(f"Deleted set {snapshot.id} ({snapshot.name})")
        return SetDeleteResponse(message="Set deleted", set=snapshot, was_active=snapshot.is_active)
