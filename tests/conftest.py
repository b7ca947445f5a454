import os
import tempfile

# Keep the file log out of the real home directory while testing
os.environ.setdefault("REMCLI_LOG_DIR", os.path.join(tempfile.gettempdir(), "remcli-test-logs"))

import pytest

from remcli.data.repository import TaskRepository


@pytest.fixture
def root(tmp_path):
    return tmp_path / "tasks"


@pytest.fixture
def repo(root):
    return TaskRepository(root)
