"""Tests for the undo stack."""

import pytest
from pydantic import ValidationError

from cardmatch.errors import CardMatchError
from cardmatch.models.card import CardState, Position
from cardmatch.models.undo import EmptyUndoStackError, UndoCommand, UndoStack


def command(card_id: int) -> UndoCommand:
    return UndoCommand(
        card_id=card_id,
        from_position=Position(x=card_id, y=0),
        prev_active_id=card_id - 1,
        prev_state=CardState.HIDDEN,
        prev_order=card_id,
    )


class TestUndoStack:
    """Tests for UndoStack class."""

    def test_empty(self):
        stack = UndoStack()
        assert not stack.can_undo()
        assert len(stack) == 0
        assert stack.peek() is None

    def test_lifo(self):
        """Test that commands come back newest first."""
        stack = UndoStack()
        for i in range(3):
            stack.push(command(i))

        assert stack.can_undo()
        assert [stack.pop().card_id for _ in range(3)] == [2, 1, 0]
        assert not stack.can_undo()

    def test_pop_empty_raises(self):
        """Test that an empty pop is an explicit error."""
        stack = UndoStack()
        with pytest.raises(EmptyUndoStackError):
            stack.pop()

    def test_error_shared_with_core_errors(self):
        """Test that the undo error is the one defined with the core errors."""
        from cardmatch import errors

        assert EmptyUndoStackError is errors.EmptyUndoStackError

    def test_empty_error_type(self):
        assert issubclass(EmptyUndoStackError, CardMatchError)
        assert issubclass(EmptyUndoStackError, LookupError)

    def test_peek(self):
        stack = UndoStack()
        stack.push(command(1))
        assert stack.peek().card_id == 1
        assert len(stack) == 1

    def test_clear(self):
        stack = UndoStack()
        stack.push(command(1))
        stack.push(command(2))
        stack.clear()
        assert not stack.can_undo()


class TestUndoCommand:
    """Tests for UndoCommand."""

    def test_immutable(self):
        cmd = command(1)
        with pytest.raises(ValidationError):
            cmd.prev_order = 5

    def test_no_previous_active(self):
        cmd = UndoCommand(
            card_id=0,
            from_position=Position(),
            prev_active_id=None,
            prev_state=CardState.REVEALED,
            prev_order=0,
        )
        assert cmd.prev_active_id is None
