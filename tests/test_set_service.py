#!/usr/bin/env python3
"""
Pytest tests for SetService: naming rules and the single-active-set invariant
"""

import pytest

from quizhub.core.exceptions import InvalidInputError, NotFoundError
from quizhub.models.quiz_set import QuizSet
from quizhub.schemas.quiz_set import SetCreate, SetUpdate
from quizhub.services.quiz_set import SetService


def _active_count(db_session) -> int:
    return db_session.query(QuizSet).filter(QuizSet.is_active.is_(True)).count()


class TestSetCreation:
    """Test creating sets"""

    @pytest.fixture(autouse=True)
    def _service(self, db_session):
        self.db = db_session
        self.service = SetService(db_session)

    def test_create_single_set(self):
        """A new set is trimmed and starts inactive"""
        created = self.service.create_sets([SetCreate(name="  Math  ")])

        assert len(created) == 1
        assert created[0].name == "Math"
        assert created[0].is_active is False
        assert len(created[0].id) == 24

    def test_create_batch(self):
        """Several sets can be created at once"""
        created = self.service.create_sets([SetCreate(name="Math"), SetCreate(name="Science")])

        assert sorted(s.name for s in created) == ["Math", "Science"]
        assert self.db.query(QuizSet).count() == 2

    def test_blank_name_rejects_batch(self):
        """A blank name anywhere rejects the whole request"""
        with pytest.raises(InvalidInputError, match="Each set must have a name"):
            self.service.create_sets([SetCreate(name="Math"), SetCreate(name="   ")])

        assert self.db.query(QuizSet).count() == 0

    def test_missing_name_rejected(self):
        """A set without a name is rejected"""
        with pytest.raises(InvalidInputError):
            self.service.create_sets([SetCreate()])

    def test_duplicate_of_existing_name(self):
        """Creating "Math" twice fails and does not create a second record"""
        self.service.create_sets([SetCreate(name="Math")])

        with pytest.raises(InvalidInputError, match="Duplicate set names: Math"):
            self.service.create_sets([SetCreate(name="Math")])

        assert self.db.query(QuizSet).filter(QuizSet.name == "Math").count() == 1

    def test_duplicate_rejects_whole_batch(self):
        """One collision blocks the other names in the batch as well"""
        self.service.create_sets([SetCreate(name="Math")])

        with pytest.raises(InvalidInputError):
            self.service.create_sets([SetCreate(name="Art"), SetCreate(name="Math")])

        assert self.db.query(QuizSet).filter(QuizSet.name == "Art").count() == 0

    def test_duplicate_inside_batch(self):
        """The same name twice in one batch is a duplicate"""
        with pytest.raises(InvalidInputError, match="Duplicate set names: Art"):
            self.service.create_sets([SetCreate(name="Art"), SetCreate(name=" Art")])

        assert self.db.query(QuizSet).count() == 0

    def test_names_are_case_sensitive(self):
        """"math" and "Math" are different names"""
        self.service.create_sets([SetCreate(name="Math")])
        created = self.service.create_sets([SetCreate(name="math")])

        assert created[0].name == "math"


class TestSetRename:
    """Test renaming sets"""

    @pytest.fixture(autouse=True)
    def _service(self, db_session):
        self.service = SetService(db_session)
        self.math, self.art = self.service.create_sets(
            [SetCreate(name="Math"), SetCreate(name="Art")]
        )

    def test_rename(self):
        """Renaming trims and stores the new name"""
        result = self.service.rename_set(self.math.id, SetUpdate(name=" Algebra "))

        assert result.message == "Set updated"
        assert result.set.name == "Algebra"

    def test_rename_to_own_name(self):
        """Keeping the same name is not a conflict"""
        result = self.service.rename_set(self.math.id, SetUpdate(name="Math"))
        assert result.set.name == "Math"

    def test_rename_to_taken_name(self):
        """Another set's name is rejected"""
        with pytest.raises(InvalidInputError, match="already exists"):
            self.service.rename_set(self.math.id, SetUpdate(name="Art"))

    def test_rename_blank(self):
        """A blank name is rejected"""
        with pytest.raises(InvalidInputError, match="Set name is required"):
            self.service.rename_set(self.math.id, SetUpdate(name=""))

    def test_rename_unknown(self):
        """Unknown ids are not found"""
        with pytest.raises(NotFoundError):
            self.service.rename_set("f" * 24, SetUpdate(name="Geometry"))


class TestSetActivation:
    """Test the at-most-one-active invariant"""

    @pytest.fixture(autouse=True)
    def _service(self, db_session):
        self.db = db_session
        self.service = SetService(db_session)
        self.sets = self.service.create_sets(
            [SetCreate(name="One"), SetCreate(name="Two"), SetCreate(name="Three")]
        )

    def test_no_active_set_initially(self):
        """get_active_set raises when nothing is active"""
        with pytest.raises(NotFoundError, match="No active set found"):
            self.service.get_active_set()

    def test_activate(self):
        """Activating a set makes it the active one"""
        result = self.service.activate_set(self.sets[0].id)

        assert result.message == "Set activated successfully"
        assert result.set.is_active is True
        assert self.service.get_active_set().id == self.sets[0].id

    def test_exactly_one_active_after_each_activation(self):
        """After any activation exactly one set is active"""
        for quiz_set in self.sets + list(reversed(self.sets)):
            self.service.activate_set(quiz_set.id)
            assert _active_count(self.db) == 1
            assert self.service.get_active_set().id == quiz_set.id

    def test_activate_unknown_keeps_current(self):
        """A failed activation does not deactivate the current set"""
        self.service.activate_set(self.sets[1].id)

        with pytest.raises(NotFoundError):
            self.service.activate_set("0" * 24)

        assert self.service.get_active_set().id == self.sets[1].id

    def test_deactivate_all(self):
        """Deactivate-all leaves no active set"""
        self.service.activate_set(self.sets[2].id)

        result = self.service.deactivate_all()

        assert result.message == "All sets deactivated successfully"
        assert _active_count(self.db) == 0

    def test_deactivate_all_when_none_active(self):
        """Deactivate-all always succeeds"""
        result = self.service.deactivate_all()
        assert result.message == "All sets deactivated successfully"


class TestSetDeletion:
    """Test deleting and listing sets"""

    @pytest.fixture(autouse=True)
    def _service(self, db_session):
        self.service = SetService(db_session)

    def test_delete_reports_active_state(self):
        """Delete returns the removed set and whether it was active"""
        quiz_set = self.service.create_sets([SetCreate(name="Math")])[0]
        self.service.activate_set(quiz_set.id)

        result = self.service.delete_set(quiz_set.id)

        assert result.message == "Set deleted"
        assert result.was_active is True
        assert result.set.name == "Math"
        assert self.service.list_sets() == []

    def test_delete_unknown(self):
        """Deleting an unknown id is not found"""
        with pytest.raises(NotFoundError, match="Set not found"):
            self.service.delete_set("1" * 24)

    def test_list_newest_first(self):
        """Sets are listed by creation time, newest first"""
        self.service.create_sets([SetCreate(name="First")])
        self.service.create_sets([SetCreate(name="Second")])

        assert [s.name for s in self.service.list_sets()] == ["Second", "First"]


class TestSetReferenceResolution:
    """Test resolving a question's set reference by id or by name"""

    @pytest.fixture(autouse=True)
    def _service(self, db_session):
        self.service = SetService(db_session)
        self.quiz_set = self.service.create_sets([SetCreate(name="Physics")])[0]

    def test_resolve_by_name(self):
        assert self.service.resolve_reference("Physics").id == self.quiz_set.id

    def test_resolve_by_id(self):
        assert self.service.resolve_reference(self.quiz_set.id).name == "Physics"

    def test_unknown_id(self):
        """Unknown ids are input errors, not path lookups"""
        with pytest.raises(InvalidInputError, match='Set with ID "eeeeeeeeeeeeeeeeeeeeeeee" not found.'):
            self.service.resolve_reference("e" * 24)

    def test_unknown_name_with_hint(self):
        with pytest.raises(InvalidInputError, match="Please create the set first."):
            self.service.resolve_reference("Chemistry", "Please create the set first.")
