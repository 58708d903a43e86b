"""
To-Do List App Module

Provides To-Do list functionality for TaskBoard including:
- TaskStore: MongoDB persistence
- Flask Blueprint: server-rendered pages
"""

from .manager import TaskStore, StorageConnectionError, InvalidTaskId, ValidationError
from .routes import create_todo_blueprint

__all__ = [
    'TaskStore', 'StorageConnectionError', 'InvalidTaskId', 'ValidationError',
    'create_todo_blueprint',
]
