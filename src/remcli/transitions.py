"""
Status state machine.

Tasks move one step at a time along TODO -> DOING -> DONE. Stepping past
either end is a no-op, not an error.
"""
from typing import Dict, Optional
from remcli.models import Task, TaskStatus
from remcli.logs import get_logger

log = get_logger("transitions")

_FORWARD: Dict[TaskStatus, TaskStatus] = {
    TaskStatus.TODO: TaskStatus.DOING,
    TaskStatus.DOING: TaskStatus.DONE,
}

_BACKWARD: Dict[TaskStatus, TaskStatus] = {
    TaskStatus.DONE: TaskStatus.DOING,
    TaskStatus.DOING: TaskStatus.TODO,
}

def next_status(status: TaskStatus) -> Optional[TaskStatus]:
    return _FORWARD.get(status)

def previous_status(status: TaskStatus) -> Optional[TaskStatus]:
    return _BACKWARD.get(status)

def _step(repository, task: Task, target: Optional[TaskStatus]) -> bool:
    if target is None:
        log.debug(f"Task {task.id} already at {task.status.value}, nothing to do")
        return False
    repository.move_status(task, target)
    return True

def forward(repository, task: Task) -> bool:
    """Advance ``task`` one status. Returns False when it is already DONE."""
    return _step(repository, task, next_status(task.status))

def backward(repository, task: Task) -> bool:
    """Move ``task`` back one status. Returns False when it is already TODO."""
    return _step(repository, task, previous_status(task.status))
