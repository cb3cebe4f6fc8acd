from typing import List, Optional

from sqlalchemy.orm import Session

from quizhub.models.question import Question


class QuestionRepository:
    """Repository for Question database operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, question_id: str) -> Optional[Question]:
        """Get a question by ID"""
        return self.db.query(Question).filter(Question.id == question_id).first()

    def get_by_set_id(self, set_id: str) -> List[Question]:
        """Get all questions belonging to a set, newest first"""
        return (
            self.db.query(Question)
            .filter(Question.set_id == set_id)
            .order_by(Question.created_at.desc())
            .all()
        )

    def get_all(self) -> List[Question]:
        """Get all questions, newest first"""
        return self.db.query(Question).order_by(Question.created_at.desc()).all()

    def create_bulk(self, question_data_list: List[dict]) -> List[Question]:
        """Create multiple questions in one commit"""
        db_questions = [Question(**data) for data in question_data_list]
        self.db.add_all(db_questions)
        self.db.commit()
        for question in db_questions:
            self.db.refresh(question)
        return db_questions

    def update(self, question: Question, update_data: dict) -> Question:
        """Replace a question's fields"""
        for field, value in update_data.items():
            setattr(question, field, value)
        self.db.commit()
        self.db.refresh(question)
        return question

    def delete(self, question: Question) -> bool:
        """Delete a question"""
        self.db.delete(question)
        self.db.commit()
        return True

    def delete_by_set_id(self, set_id: str) -> int:
        """Delete all questions for a set"""
        deleted_count = (
            self.db.query(Question)
            .filter(Question.set_id == set_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted_count
