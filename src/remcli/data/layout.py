"""
Directory-as-state mapping.

Every status owns one subdirectory of the storage root. This module is the
only place that knows the directory names.
"""
from pathlib import Path
from typing import Dict, Optional
from uuid import UUID
from remcli.models import TaskStatus

RECORD_SUFFIX = ".md"

_STATUS_DIRS: Dict[TaskStatus, str] = {
    TaskStatus.TODO: "todo",
    TaskStatus.DOING: "doing",
    TaskStatus.DONE: "done",
}

def status_dir(status: TaskStatus) -> str:
    """Name of the subdirectory holding records in ``status``."""
    return _STATUS_DIRS[status]

def status_path(root: Path, status: TaskStatus) -> Path:
    return Path(root) / status_dir(status)

def record_path(root: Path, status: TaskStatus, task_id: UUID) -> Path:
    """Full path of the record for ``task_id`` while it is in ``status``."""
    return status_path(root, status) / f"{task_id}{RECORD_SUFFIX}"

def is_record(path: Path) -> bool:
    """True for visible regular files carrying the record suffix."""
    return path.suffix == RECORD_SUFFIX and not path.name.startswith('.') and path.is_file()

def record_id(path: Path) -> Optional[UUID]:
    """Identifier encoded in a record's file name, or None if it is not a uuid."""
    try:
        return UUID(Path(path).stem)
    except ValueError:
        return None
