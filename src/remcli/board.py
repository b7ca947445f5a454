"""
TaskBoard - the in-memory task list an interactive front end works against.

Holds the ordered tasks, the selection cursor and whether DONE tasks are
shown. Every mutation goes through the repository first and only then
replaces the list, so the list never shows a state that is not on disk.
"""
from pathlib import Path
from typing import List, Optional
from remcli import transitions
from remcli.models import Task, TaskStatus
from remcli.ordering import group_and_sort
from remcli.recovery import TaskNotFoundError
from remcli.logs import get_logger

log = get_logger("board")

class TaskBoard:
    def __init__(self, repository, tasks: Optional[List[Task]] = None, done_loaded: bool = False):
        self.repository = repository
        self.tasks: List[Task] = group_and_sort(tasks or [])
        self.done_loaded: bool = done_loaded
        self.selected_index: Optional[int] = 0 if self.tasks else None

    @classmethod
    def open(cls, repository, include_done: bool = False) -> 'TaskBoard':
        """Load active tasks (and DONE ones if asked) from ``repository``."""
        statuses = [TaskStatus.TODO, TaskStatus.DOING]
        if include_done:
            statuses.append(TaskStatus.DONE)
        tasks = repository.load_by_statuses(statuses)
        log.debug(f"Opened board with {len(tasks)} tasks from {repository.root}")
        return cls(repository, tasks, done_loaded=include_done)

    # -------------------- queries --------------------
    def selected(self) -> Optional[Task]:
        if self.selected_index is None:
            return None
        return self.tasks[self.selected_index]

    def selected_path(self) -> Optional[Path]:
        task = self.selected()
        if task is None:
            return None
        return self.repository.path_for(task)

    def find(self, prefix: str) -> Task:
        """Loaded task whose id starts with ``prefix``."""
        prefix = prefix.strip().lower()
        matches = [t for t in self.tasks if prefix and str(t.id).startswith(prefix)]
        if not matches:
            raise TaskNotFoundError(f"No task matches id '{prefix}'")
        if len(matches) > 1:
            raise TaskNotFoundError(f"Id '{prefix}' is ambiguous ({len(matches)} tasks match)")
        return matches[0]

    def select(self, task: Task):
        self.selected_index = self.tasks.index(task)

    # -------------------- mutation --------------------
    def _reorder(self):
        self.tasks = group_and_sort(self.tasks)

    def add_task(self, name: str) -> Optional[Task]:
        """Create and persist a TODO task. Blank names are ignored."""
        if not name:
            return None
        task = Task.new(name)
        self.repository.save(task)
        self.tasks = group_and_sort(self.tasks + [task])
        if self.selected_index is None:
            self.selected_index = 0
        log.info(f"Added task {task.id}: {name}")
        return task

    def forward_selected(self) -> bool:
        task = self.selected()
        if task is None:
            return False
        moved = transitions.forward(self.repository, task)
        if moved:
            self._reorder()
        return moved

    def backward_selected(self) -> bool:
        task = self.selected()
        if task is None:
            return False
        moved = transitions.backward(self.repository, task)
        if moved:
            self._reorder()
        return moved

    def toggle_done(self):
        """Show DONE tasks if hidden, hide them if shown."""
        if self.done_loaded:
            self.tasks = [t for t in self.tasks if t.status != TaskStatus.DONE]
            self.done_loaded = False
        else:
            # Drop any DONE tasks already in memory so reloading cannot duplicate them
            active = [t for t in self.tasks if t.status != TaskStatus.DONE]
            self.tasks = group_and_sort(active + self.repository.load_done())
            self.done_loaded = True
        self._clamp_selection()

    def reload_selected(self) -> Optional[Task]:
        """Re-read the selected task from disk, e.g. after it was edited."""
        if self.selected_index is None:
            return None
        fresh = self.repository.reload(self.tasks[self.selected_index])
        tasks = list(self.tasks)
        tasks[self.selected_index] = fresh
        self.tasks = tasks
        return fresh

    # -------------------- selection --------------------
    def _clamp_selection(self):
        if not self.tasks:
            self.selected_index = None
        elif self.selected_index is None:
            self.selected_index = 0
        elif self.selected_index >= len(self.tasks):
            self.selected_index = len(self.tasks) - 1

    def select_next(self):
        if not self.tasks:
            return
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = min(self.selected_index + 1, len(self.tasks) - 1)

    def select_previous(self):
        if not self.tasks:
            return
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = max(self.selected_index - 1, 0)
