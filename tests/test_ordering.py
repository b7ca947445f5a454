"""Unit tests for task ordering."""

from datetime import datetime, timedelta, timezone
from remcli.models import Task, TaskStatus
from remcli.ordering import group_and_sort, sort_by_created, STATUS_ORDER

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_task(name, status, minutes):
    created = BASE + timedelta(minutes=minutes)
    return Task(name=name, status=status, created_at=created, updated_at=created)


class TestGroupAndSort:
    """Test grouping by status and ordering by creation time."""

    def test_groups_in_status_order(self):
        """Test grouping tasks in status order."""
        done = make_task("done", TaskStatus.DONE, 1)
        doing = make_task("doing", TaskStatus.DOING, 2)
        todo = make_task("todo", TaskStatus.TODO, 3)

        for tasks in ([done, doing, todo], [todo, done, doing], [doing, todo, done]):
            ordered = group_and_sort(tasks)
            assert [t.status for t in ordered] == list(STATUS_ORDER)

    def test_sorted_within_group(self):
        """Test sorting each group by creation time."""
        first = make_task("first", TaskStatus.TODO, 1)
        second = make_task("second", TaskStatus.TODO, 2)
        assert group_and_sort([second, first]) == [first, second]

    def test_ties_keep_incoming_order(self):
        """Test that equal timestamps keep their order."""
        a = make_task("a", TaskStatus.TODO, 5)
        b = make_task("b", TaskStatus.TODO, 5)
        assert [t.name for t in group_and_sort([a, b])] == ["a", "b"]
        assert [t.name for t in group_and_sort([b, a])] == ["b", "a"]

    def test_returns_new_list(self):
        """Test that sorting does not modify its input."""
        tasks = [make_task("b", TaskStatus.DONE, 2), make_task("a", TaskStatus.TODO, 1)]
        ordered = group_and_sort(tasks)
        assert ordered is not tasks
        assert [t.name for t in tasks] == ["b", "a"]

    def test_empty(self):
        """Test sorting an empty list."""
        assert group_and_sort([]) == []

    def test_sort_by_created_ignores_status(self):
        """Test sorting by creation time alone."""
        late_todo = make_task("late", TaskStatus.TODO, 9)
        early_done = make_task("early", TaskStatus.DONE, 1)
        assert sort_by_created([late_todo, early_done]) == [early_done, late_todo]
