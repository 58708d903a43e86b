"""
In-memory stand-ins for the pymongo objects TaskStore talks to
"""

from types import SimpleNamespace
from typing import Any, Dict, List

from bson import ObjectId


class FakeCollection:
    """
    Minimal pymongo Collection replacement.

    Supports the exact-match `_id` filters and `$set` updates used by TaskStore.
    Documents keep insertion order.
    """

    def __init__(self):
        self.documents: List[Dict[str, Any]] = []
        self.calls: List[str] = []
        self.fail_next = None
        self.skip_inserted_id = False

    def _record(self, name: str):
        self.calls.append(name)
        if self.fail_next is not None:
            error, self.fail_next = self.fail_next, None
            raise error

    def _matches(self, document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in query.items())

    def find(self, query=None):
        self._record('find')
        query = query or {}
        return iter([dict(doc) for doc in self.documents if self._matches(doc, query)])

    def find_one(self, query):
        self._record('find_one')
        for doc in self.documents:
            if self._matches(doc, query):
                return dict(doc)
        return None

    def insert_one(self, document):
        self._record('insert_one')
        if self.skip_inserted_id:
            return SimpleNamespace(inserted_id=None)
        document = dict(document)
        document.setdefault('_id', ObjectId())
        self.documents.append(document)
        return SimpleNamespace(inserted_id=document['_id'])

    def update_one(self, query, update):
        self._record('update_one')
        for doc in self.documents:
            if self._matches(doc, query):
                doc.update(update.get('$set', {}))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_one(self, query):
        self._record('delete_one')
        for index, doc in enumerate(self.documents):
            if self._matches(doc, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    @property
    def writes(self) -> List[str]:
        return [name for name in self.calls if name in ('insert_one', 'update_one', 'delete_one')]
