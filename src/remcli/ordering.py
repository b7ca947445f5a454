"""Canonical display and iteration order of tasks."""
from typing import Iterable, List
from remcli.models import Task, TaskStatus

STATUS_ORDER = (TaskStatus.TODO, TaskStatus.DOING, TaskStatus.DONE)

def sort_by_created(tasks: Iterable[Task]) -> List[Task]:
    """Oldest first; ties keep their incoming order."""
    return sorted(tasks, key=lambda t: t.created_at)

def group_and_sort(tasks: Iterable[Task]) -> List[Task]:
    """
    Group tasks by status in TODO, DOING, DONE order, oldest first within
    each group. Returns a new list.
    """
    tasks = list(tasks)
    ordered = []
    for status in STATUS_ORDER:
        ordered.extend(sort_by_created(t for t in tasks if t.status == status))
    return ordered
