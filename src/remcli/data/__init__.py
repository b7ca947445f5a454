"""
Storage submodule: record encoding, on-disk layout and the task repository.
"""

from .core import DataCore
from .repository import TaskRepository

__all__ = [
    'DataCore',
    'TaskRepository'
]
