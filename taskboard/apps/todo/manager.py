"""
To-Do Task Store

Handles persistence of tasks in a MongoDB collection.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.errors import PyMongoError


class StorageConnectionError(RuntimeError):
    """Raised when the document store cannot be reached at startup"""


class InvalidTaskId(ValueError):
    """Raised when a task id is not a valid ObjectId"""


class ValidationError(ValueError):
    """Raised when a required task field is blank"""


def parse_task_id(raw: Any) -> ObjectId:
    """
    Convert a path parameter into an ObjectId

    Args:
        raw: Task id as received from the request path

    Returns:
        ObjectId for the task

    Raises:
        InvalidTaskId: If raw is not a 24-hex-digit id
    """
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError) as e:
        raise InvalidTaskId(f"Invalid task id: {raw!r}") from e


def clean_fields(title: Optional[str], description: Optional[str]) -> Tuple[str, str]:
    """
    Trim title and description, rejecting blank values

    Args:
        title: Raw title field (may be None)
        description: Raw description field (may be None)

    Returns:
        Tuple of (title, description) with surrounding whitespace removed

    Raises:
        ValidationError: If either field is missing or whitespace-only
    """
    title = (title or '').strip()
    description = (description or '').strip()

    if not title or not description:
        raise ValidationError("Title and description are required")

    return title, description


class TaskStore:
    """Manages To-Do tasks stored in one MongoDB collection"""

    def __init__(self, collection, client: Optional[MongoClient] = None):
        """
        Initialize TaskStore

        Args:
            collection: pymongo Collection (or a compatible object) holding tasks
            client: Owning MongoClient, closed by close()
        """
        self.collection = collection
        self.client = client
        self.logger = logging.getLogger(__name__)

    @classmethod
    def connect(cls, url: str, database: str, collection: str,
                timeout_ms: int = 5000) -> 'TaskStore':
        """
        Connect to MongoDB and verify the server is reachable

        Args:
            url: MongoDB connection string
            database: Database name
            collection: Collection name
            timeout_ms: Server selection timeout in milliseconds

        Returns:
            TaskStore bound to database.collection

        Raises:
            StorageConnectionError: If the server cannot be reached
        """
        logger = logging.getLogger(__name__)
        client = None

        try:
            client = MongoClient(url, serverSelectionTimeoutMS=timeout_ms)
            client.admin.command('ping')
        except PyMongoError as e:
            if client is not None:
                client.close()
            raise StorageConnectionError(f"MongoDB connection failed: {e}") from e

        logger.info(f"MongoDB connected: {database}.{collection}")
        return cls(client[database][collection], client=client)

    @staticmethod
    def _to_task(document: Dict[str, Any]) -> Dict[str, str]:
        return {
            'id': str(document['_id']),
            'title': document.get('title', ''),
            'description': document.get('description', ''),
        }

    def list_tasks(self) -> List[Dict[str, str]]:
        """
        Load all tasks in storage order

        Returns:
            List of task dicts with 'id', 'title' and 'description' keys
        """
        return [self._to_task(doc) for doc in self.collection.find()]

    def get_task(self, task_id: ObjectId) -> Optional[Dict[str, str]]:
        """Get a single task, or None if it doesn't exist"""
        document = self.collection.find_one({'_id': task_id})
        if document is None:
            return None
        return self._to_task(document)

    def insert_task(self, title: str, description: str) -> Optional[str]:
        """
        Insert a new task

        Args:
            title: Trimmed task title
            description: Trimmed task description

        Returns:
            The new task id as a string, or None if nothing was inserted
        """
        result = self.collection.insert_one({'title': title, 'description': description})
        if not result.inserted_id:
            self.logger.warning("Insert reported no inserted id")
            return None

        self.logger.info(f"Added task {result.inserted_id}: {title}")
        return str(result.inserted_id)

    def update_task(self, task_id: ObjectId, title: str, description: str) -> int:
        """Overwrite title and description of a task, returning the matched count"""
        result = self.collection.update_one(
            {'_id': task_id},
            {'$set': {'title': title, 'description': description}}
        )
        self.logger.info(f"Updated task {task_id} (matched {result.matched_count})")
        return result.matched_count

    def delete_task(self, task_id: ObjectId) -> int:
        """Delete a task; deleting a missing task is a no-op"""
        result = self.collection.delete_one({'_id': task_id})
        self.logger.info(f"Deleted task {task_id} (removed {result.deleted_count})")
        return result.deleted_count

    def close(self):
        """Close the owning MongoClient"""
        if self.client is not None:
            self.client.close()
            self.client = None
            self.logger.debug("MongoDB client closed")
