import os
import tempfile
from pathlib import Path
from typing import List, Union
from remcli.recovery import FileOperationError
from remcli.logs import get_logger

log = get_logger("io")

def _cleanup(temp_path):
    if temp_path is None or not os.path.exists(temp_path):
        return
    try:
        os.unlink(temp_path)
        log.debug(f"Cleaned up temporary file: {temp_path}")
    except OSError as cleanup_error:
        # Don't mask the original failure, just log
        log.warning(f"Could not clean up temp file {temp_path}: {cleanup_error}")

def ensure_dir(directory: Path):
    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        error_msg = f"Cannot create directory {directory}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def atomic_write(file_path: Union[Path, str], text: str, create_dirs: bool = False):
    """
    Write text to a file using atomic updates.

    The content goes to a temporary file in the target directory, is fsynced,
    then replaces the target in one step.
    """
    file_path = Path(file_path)
    temp_path = None

    if create_dirs:
        ensure_dir(file_path.parent)

    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', newline='', dir=file_path.parent,
                                         prefix=f".{file_path.name}.", suffix='.tmp', delete=False) as temp_file:
            temp_path = temp_file.name
            temp_file.write(text)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, file_path)
        log.debug(f"Successfully wrote file: {file_path}")

    except OSError as e:
        _cleanup(temp_path)
        error_msg = f"I/O error writing file {file_path}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def read_text(file_path: Union[Path, str]) -> str:
    """Read a UTF-8 text file, mapping OS failures to FileOperationError."""
    file_path = Path(file_path)
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except OSError as e:
        error_msg = f"Failed to read file {file_path}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def rename(source: Path, destination: Path):
    try:
        os.rename(source, destination)
    except OSError as e:
        error_msg = f"Cannot move {source} to {destination}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def list_dir(directory: Path) -> List[Path]:
    """
    Entries of a directory sorted by name.

    A missing directory is treated as empty.
    """
    directory = Path(directory)
    if not directory.exists():
        return []
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        error_msg = f"Cannot list directory {directory}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e
