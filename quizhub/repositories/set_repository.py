from typing import Dict, Iterable, List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from quizhub.models.quiz_set import QuizSet


class SetRepository:
    """Repository for QuizSet database operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, set_id: str) -> Optional[QuizSet]:
        """Get a set by ID"""
        return self.db.query(QuizSet).filter(QuizSet.id == set_id).first()

    def get_by_name(self, name: str) -> Optional[QuizSet]:
        """Get a set by its exact (case-sensitive) name"""
        return self.db.query(QuizSet).filter(QuizSet.name == name).first()

    def get_by_names(self, names: Iterable[str]) -> List[QuizSet]:
        """Get every set whose name is in names"""
        names = list(names)
        if not names:
            return []
        return self.db.query(QuizSet).filter(QuizSet.name.in_(names)).all()

    def get_by_ids(self, set_ids: Iterable[str]) -> Dict[str, QuizSet]:
        """Get sets keyed by ID, skipping IDs that no longer exist"""
        set_ids = set(set_ids)
        if not set_ids:
            return {}
        rows = self.db.query(QuizSet).filter(QuizSet.id.in_(set_ids)).all()
        return {row.id: row for row in rows}

    def get_active(self) -> Optional[QuizSet]:
        """Get the active set, if any"""
        return self.db.query(QuizSet).filter(QuizSet.is_active.is_(True)).first()

    def name_taken_by_other(self, name: str, set_id: str) -> bool:
        """Check whether a set other than set_id already uses name"""
        return (
            self.db.query(QuizSet)
            .filter(QuizSet.name == name, QuizSet.id != set_id)
            .first()
            is not None
        )

    def get_all(self) -> List[QuizSet]:
        """Get all sets, newest first"""
        return self.db.query(QuizSet).order_by(QuizSet.created_at.desc()).all()

    def create_bulk(self, names: List[str]) -> List[QuizSet]:
        """Create inactive sets for the given names"""
        db_sets = [QuizSet(name=name, is_active=False) for name in names]
        self.db.add_all(db_sets)
        self.db.commit()
        for quiz_set in db_sets:
            self.db.refresh(quiz_set)
        return db_sets

    def rename(self, quiz_set: QuizSet, name: str) -> QuizSet:
        """Update a set's name"""
        quiz_set.name = name
        self.db.commit()
        self.db.refresh(quiz_set)
        return quiz_set

    def activate(self, quiz_set: QuizSet) -> QuizSet:
        """Deactivate every set and activate quiz_set in a single transaction.

        This is the only place a set is switched on while keeping the
        at-most-one-active invariant.
        """
        try:
            self.db.execute(
                update(QuizSet)
                .where(QuizSet.is_active.is_(True), QuizSet.id != quiz_set.id)
                .values(is_active=False)
            )
            quiz_set.is_active = True
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(quiz_set)
        return quiz_set

    def deactivate_all(self) -> int:
        """Deactivate every set, returning how many were active"""
        result = self.db.execute(
            update(QuizSet).where(QuizSet.is_active.is_(True)).values(is_active=False)
        )
        self.db.commit()
        return result.rowcount

    def toggle_active(self, quiz_set: QuizSet) -> QuizSet:
        """Flip a single set's active flag without touching any other set"""
        quiz_set.is_active = not quiz_set.is_active
        self.db.commit()
        self.db.refresh(quiz_set)
        return quiz_set

    def delete(self, quiz_set: QuizSet) -> bool:
        """Delete a set"""
        self.db.delete(quiz_set)
        self.db.commit()
        return True
