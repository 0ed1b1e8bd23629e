"""Shared fixtures: an in-memory backend that answers the generated documents."""

import itertools
import re

import pytest

_ROOT_FIELD = re.compile(r"^(?:query|mutation)[^{]*\{\s*(\w+)", re.S)
_SELECTION = re.compile(r"\{\s*\w+(?:\([^)]*\))?\s*\{\s*([^}]*)\}", re.S)


class InMemoryBackend:
    """Plays the data engine for the ``Test`` list, recording every execution."""

    def __init__(self):
        self.records = {}
        self.calls = []
        self._ids = itertools.count(1)

    @staticmethod
    def _project(record, fields):
        return {name: record.get(name) for name in fields}

    def _create(self, data):
        record = {"id": str(next(self._ids)), **data}
        self.records[record["id"]] = record
        return record

    def _update(self, item_id, data):
        record = self.records[item_id]
        record.update(data)
        return record

    def _matches(self, record, where):
        return all(record.get(k) == v for k, v in (where or {}).items())

    async def execute(self, document, variables, context):
        self.calls.append((document, variables, context))
        operation = _ROOT_FIELD.match(document).group(1)
        fields = [f for f in re.split(r"[\s,]+", _SELECTION.search(document).group(1)) if f]

        if operation == "createTest":
            result = self._create(variables["item"])
        elif operation == "createTests":
            result = [self._create(item["data"]) for item in variables["items"]]
        elif operation == "Test":
            result = self.records.get(variables["id"])
        elif operation == "allTests":
            result = [r for r in self.records.values() if self._matches(r, variables.get("where"))]
        elif operation == "updateTest":
            result = self._update(variables["id"], variables["data"])
        elif operation == "updateTests":
            result = [self._update(item["id"], item["data"]) for item in variables["items"]]
        elif operation == "deleteTest":
            result = self.records.pop(variables["id"], None)
        elif operation == "deleteTests":
            result = [self.records.pop(item_id) for item_id in variables["ids"]]
        else:
            return {"data": None, "errors": [{"message": f"Cannot query field '{operation}'"}]}

        if isinstance(result, list):
            return {"data": {operation: [self._project(r, fields) for r in result]}}
        return {"data": {operation: self._project(result, fields) if result is not None else None}}


@pytest.fixture
def backend():
    return InMemoryBackend()


@pytest.fixture
def test_data():
    return [{"name": "test", "age": 30}, {"name": "test2", "age": 40}]
