"""
DataCore - Storage configuration for remcli.

Holds the fixed storage locations and builds repositories and boards bound
to an explicit root, so callers (and tests) can point them elsewhere.
"""
from pathlib import Path
from typing import Optional, Union
from remcli.board import TaskBoard
from remcli.data.io import ensure_dir
from remcli.data.layout import status_path
from remcli.data.repository import TaskRepository
from remcli.ordering import STATUS_ORDER
from remcli.logs import DEFAULT_LOG_DIR, get_logger

log = get_logger("data")

class DataCore:
    TASKS_DIR = Path.home() / ".rem-cli" / "tasks"
    LOG_DIR = DEFAULT_LOG_DIR

    @staticmethod
    def resolve_root(root: Optional[Union[Path, str]] = None) -> Path:
        return Path(root) if root is not None else DataCore.TASKS_DIR

    @staticmethod
    def repository(root: Optional[Union[Path, str]] = None) -> TaskRepository:
        repository = TaskRepository(DataCore.resolve_root(root))
        log.debug(f"Using task storage at {repository.root}")
        return repository

    @staticmethod
    def board(root: Optional[Union[Path, str]] = None, include_done: bool = False) -> TaskBoard:
        return TaskBoard.open(DataCore.repository(root), include_done=include_done)

    @staticmethod
    def init_storage(root: Optional[Union[Path, str]] = None) -> Path:
        """Create the status directories below ``root``. Returns the root."""
        root = DataCore.resolve_root(root)
        for status in STATUS_ORDER:
            ensure_dir(status_path(root, status))
        return root
