import random
import sys
from pathlib import Path

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import pytest

from taskstack.exceptions import DuplicateNameError, NoHistoryError, NotFoundError
from taskstack.registry import TaskRegistry


def pairs(registry):
    return [(t.name, t.description) for t in registry.list_tasks()]


def assert_consistent(registry):
    """The name index holds exactly the tasks in the ordered list."""
    listed = registry.list_tasks()
    indexed = list(registry._index)

    assert sorted(t.key for t in listed) == [t.key for t in indexed]
    for task in listed:
        assert registry.search_task(task.name) is task


@pytest.fixture
def registry():
    return TaskRegistry(max_history=0)


def test_add_and_list(registry):
    registry.add_task("Homework", "Math")
    registry.add_task("Laundry", "Chores")

    assert pairs(registry) == [("Homework", "Math"), ("Laundry", "Chores")]
    assert len(registry) == 2
    assert_consistent(registry)


def test_search_ignores_case(registry):
    registry.add_task("Homework", "Math")

    found = registry.search_task("HOMEWORK")

    assert found is not None
    assert found.name == "Homework"
    assert found.description == "Math"
    assert "homework" in registry
    assert registry.search_task("Laundry") is None


def test_duplicate_add_is_rejected_everywhere(registry):
    registry.add_task("Homework", "Math")

    with pytest.raises(DuplicateNameError):
        registry.add_task("homework", "History")

    assert pairs(registry) == [("Homework", "Math")]
    assert_consistent(registry)

    # Only the first add was logged
    registry.undo()
    assert pairs(registry) == []
    with pytest.raises(NoHistoryError):
        registry.undo()


def test_add_strips_name(registry):
    registry.add_task("  Homework ", "Math")

    assert registry.search_task("homework").name == "Homework"


def test_add_empty_name_raises(registry):
    with pytest.raises(ValueError):
        registry.add_task("  ", "Math")

    assert not registry.can_undo


def test_remove_missing_leaves_history_untouched(registry):
    registry.add_task("Homework", "Math")
    registry.undo()
    undoable = registry._log.get_undoable()
    redoable = registry._log.get_redoable()

    with pytest.raises(NotFoundError) as exc:
        registry.remove_task("Laundry")

    assert exc.value.name == "Laundry"
    assert registry._log.get_undoable() == undoable
    assert registry._log.get_redoable() == redoable
    assert registry.can_redo


def test_remove_then_undo_restores_position_and_description(registry):
    registry.add_task("Homework", "Math")
    registry.add_task("Laundry", "Chores")
    registry.remove_task("Homework")

    applied = registry.undo()

    assert applied.direction == "undo"
    assert applied.added
    assert applied.task.description == "Math"
    assert pairs(registry) == [("Homework", "Math"), ("Laundry", "Chores")]
    assert_consistent(registry)

    applied = registry.redo()

    assert applied.direction == "redo"
    assert not applied.added
    assert pairs(registry) == [("Laundry", "Chores")]
    assert_consistent(registry)


def test_undo_add_then_redo_keeps_description(registry):
    registry.add_task("Homework", "Math")
    before = pairs(registry)
    registry.add_task("Laundry", "Chores")

    registry.undo()
    assert pairs(registry) == before
    assert registry.search_task("Laundry") is None

    registry.redo()
    assert pairs(registry) == [("Homework", "Math"), ("Laundry", "Chores")]
    assert registry.search_task("laundry").description == "Chores"
    assert_consistent(registry)


def test_remove_undo_redo_undo_round_trip(registry):
    registry.add_task("Homework", "Math")
    registry.add_task("Laundry", "Chores")
    registry.add_task("Dishes", "Kitchen")
    registry.remove_task("laundry")

    registry.undo()
    registry.redo()
    registry.undo()

    assert pairs(registry) == [
        ("Homework", "Math"),
        ("Laundry", "Chores"),
        ("Dishes", "Kitchen"),
    ]
    assert_consistent(registry)


def test_new_edit_clears_redo(registry):
    registry.add_task("A", "first")
    registry.add_task("B", "second")
    registry.remove_task("B")
    registry.undo()
    registry.undo()
    assert registry.can_redo

    registry.add_task("C", "third")

    assert not registry.can_redo
    with pytest.raises(NoHistoryError) as exc:
        registry.redo()
    assert exc.value.direction == "redo"


def test_undo_everything_then_redo_everything(registry):
    registry.add_task("Homework", "Math")
    registry.add_task("Laundry", "Chores")
    registry.remove_task("Homework")
    registry.add_task("Dishes", "Kitchen")
    final = pairs(registry)

    for _ in range(4):
        registry.undo()
    assert pairs(registry) == []
    assert not registry.can_undo

    for _ in range(4):
        registry.redo()
    assert pairs(registry) == final
    assert not registry.can_redo
    assert_consistent(registry)


def test_empty_history_raises(registry):
    with pytest.raises(NoHistoryError) as exc:
        registry.undo()

    assert exc.value.direction == "undo"


def test_failed_undo_keeps_record(registry):
    registry.add_task("Homework", "Math")
    # Bypass the facade to break the invariant on purpose
    registry._index.remove("Homework")
    registry._sequence.remove_by_name("Homework")

    with pytest.raises(NotFoundError):
        registry.undo()

    assert registry.can_undo


def test_history_lists_inverse_records(registry):
    registry.add_task("Homework", "Math")
    registry.remove_task("Homework")

    history = registry.history()

    assert [r.describe() for r in history] == ["add Homework: Math", "remove Homework"]


def test_max_history_bounds_undo():
    registry = TaskRegistry(max_history=1)
    registry.add_task("A", "")
    registry.add_task("B", "")

    registry.undo()
    with pytest.raises(NoHistoryError):
        registry.undo()

    assert pairs(registry) == [("A", "")]


def test_random_edits_keep_structures_in_sync(registry):
    rng = random.Random(1234)
    names = [f"Task{i}" for i in range(12)]
    expected = []

    for _ in range(300):
        op = rng.choice(["add", "remove", "undo", "redo"])
        name = rng.choice(names)
        try:
            if op == "add":
                registry.add_task(name.lower() if rng.random() < 0.5 else name, name)
            elif op == "remove":
                registry.remove_task(name.upper())
            elif op == "undo":
                registry.undo()
            else:
                registry.redo()
        except (DuplicateNameError, NotFoundError, NoHistoryError):
            pass

        assert_consistent(registry)
        expected = [t.key for t in registry.list_tasks()]
        assert len(set(expected)) == len(expected)


def test_many_sorted_names(registry):
    names = [f"task{i:05d}" for i in range(1500)]
    for name in names:
        registry.add_task(name, "")

    assert registry.search_task("TASK01499").name == "task01499"

    for name in names:
        registry.remove_task(name)
    for _ in range(len(names)):
        registry.undo()

    assert [t.name for t in registry.list_tasks()] == names
    assert_consistent(registry)


def test_negative_max_history_is_rejected():
    with pytest.raises(ValueError):
        TaskRegistry(max_history=-1)
