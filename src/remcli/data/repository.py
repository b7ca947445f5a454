"""
TaskRepository - the sole owner of the on-disk layout.

Records live under ``<root>/<status dir>/<id>.md``; the directory a record sits
in is its status. Single loads are strict, bulk loads skip unreadable records
so that one corrupted file never blocks startup.
"""
from pathlib import Path
from typing import Iterable, List, Union
from remcli.data import codec
from remcli.data.io import atomic_write, ensure_dir, list_dir, read_text, rename
from remcli.data.layout import is_record, record_id, record_path, status_path
from remcli.models import Task, TaskStatus, utc_now
from remcli.ordering import STATUS_ORDER, sort_by_created
from remcli.recovery import FileOperationError, MalformedRecordError
from remcli.logs import get_logger

log = get_logger("data.repository")

class TaskRepository:
    """Loads, saves and moves task records below a storage root."""

    def __init__(self, root: Union[Path, str]):
        self.root = Path(root).expanduser().absolute()

    def path_for(self, task: Task) -> Path:
        """Absolute path of the file representing ``task`` in its current status."""
        return record_path(self.root, task.status, task.id)

    # -------------------- writing --------------------
    def _existing_body(self, path: Path) -> str:
        if not path.exists():
            return ""
        text = read_text(path)
        try:
            return codec.split_document(text)[1]
        except MalformedRecordError:
            log.warning(f"Overwriting record without a metadata block: {path}")
            return ""

    def save(self, task: Task):
        """
        Write ``task`` to its record, creating the status directory if needed.

        The metadata block is rewritten; a body already present in the file is
        kept.

        Raises:
            FileOperationError: if the directory or file cannot be written.
        """
        path = self.path_for(task)
        ensure_dir(path.parent)
        body = self._existing_body(path)
        atomic_write(path, codec.encode(task, body))
        log.debug(f"Saved task {task.id} ({task.status.value}) to {path}")

    def move_status(self, task: Task, new_status: TaskStatus):
        """
        Move ``task`` to ``new_status``, renaming its record between directories.

        The record is renamed under its stable name and then rewritten with the
        new ``updated_at``. The in-memory task only changes once both steps
        succeeded; on failure the rename is reverted and the error raised.

        Raises:
            FileOperationError: if the record is missing, the target is taken, or
                the record cannot be moved.
        """
        if new_status == task.status:
            return

        old_path = self.path_for(task)
        moved = task.model_copy(update={'status': new_status, 'updated_at': utc_now()})
        new_path = self.path_for(moved)

        if not old_path.is_file():
            error_msg = f"Cannot move task {task.id}: no record at {old_path}"
            log.error(error_msg)
            raise FileOperationError(error_msg)

        if new_path.exists():
            error_msg = f"Cannot move task {task.id}: a record already exists at {new_path}"
            log.error(error_msg)
            raise FileOperationError(error_msg)

        body = codec.body_of(read_text(old_path))
        ensure_dir(new_path.parent)
        rename(old_path, new_path)

        try:
            atomic_write(new_path, codec.encode(moved, body))
        except FileOperationError:
            log.warning(f"Rolling back move of task {task.id} to {new_status.value}")
            rename(new_path, old_path)
            raise

        task.status = moved.status
        task.updated_at = moved.updated_at
        log.debug(f"Moved task {task.id} from {old_path.parent.name} to {new_path.parent.name}")

    # -------------------- reading --------------------
    def load_one(self, path: Union[Path, str], status: TaskStatus) -> Task:
        """
        Read and decode a single record.

        Raises:
            FileOperationError: if the file cannot be read.
            MalformedRecordError: if its metadata block is missing or invalid.
        """
        path = Path(path)
        text = read_text(path)
        try:
            return codec.decode(text, status)
        except MalformedRecordError as e:
            e.path = path
            raise

    def load_by_statuses(self, statuses: Iterable[TaskStatus]) -> List[Task]:
        """
        Load every readable record for the given statuses, oldest first.

        Missing status directories count as empty. Records that cannot be read
        or decoded are skipped.
        """
        tasks = []
        for status in sorted(set(statuses), key=STATUS_ORDER.index):
            for path in list_dir(status_path(self.root, status)):
                if not is_record(path):
                    continue
                try:
                    task = self.load_one(path, status)
                except (MalformedRecordError, FileOperationError) as e:
                    log.warning(f"Skipping unreadable task record {path}: {e}")
                    continue
                if record_id(path) != task.id:
                    log.warning(f"Record {path.name} holds task id {task.id}")
                tasks.append(task)

        return sort_by_created(tasks)

    def load_todo(self) -> List[Task]:
        return self.load_by_statuses([TaskStatus.TODO])

    def load_doing(self) -> List[Task]:
        return self.load_by_statuses([TaskStatus.DOING])

    def load_done(self) -> List[Task]:
        return self.load_by_statuses([TaskStatus.DONE])

    def reload(self, task: Task) -> Task:
        """Fresh copy of ``task`` read back from its record, e.g. after an external edit."""
        return self.load_one(self.path_for(task), task.status)

    def read_content(self, task: Task) -> str:
        """Full text of the task's record."""
        return read_text(self.path_for(task))

    def read_preview(self, task: Task) -> str:
        """Body of the task's record; empty when the record no longer exists."""
        path = self.path_for(task)
        if not path.exists():
            return ""
        return codec.body_of(read_text(path))
