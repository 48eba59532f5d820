import pytest

from salvo.core.errors import DuplicateTargetError
from salvo.core.history import AttackHistory
from salvo.core.models import Position, all_positions


def test_history_is_append_only_and_rejects_duplicates() -> None:
    history = AttackHistory()
    history.add(Position(1, 1))
    history.add(Position(2, 2))
    with pytest.raises(DuplicateTargetError):
        history.add(Position(1, 1))
    assert len(history) == 2
    assert list(history) == [Position(1, 1), Position(2, 2)]
    assert Position(1, 1) in history


def test_history_full_and_remaining() -> None:
    history = AttackHistory()
    cells = list(all_positions())
    for cell in cells[:-1]:
        history.add(cell)
    assert not history.is_full
    assert history.remaining() == [Position(9, 9)]
    history.add(Position(9, 9))
    assert history.is_full
    assert history.remaining() == []


def test_history_clear_between_games() -> None:
    history = AttackHistory()
    history.add(Position(0, 0))
    history.clear()
    assert len(history) == 0
    assert Position(0, 0) not in history
