import pytest

from document_ui.models.errors import RemoteError
from document_ui.services.remote_collection_memory import MemoryRemoteCollection


def make_clients(count):
    """Client rows with increasing created_at, so the newest is id `count`."""
    return [
        {
            "id": str(index),
            "company_name": f"Company {index:02d}",
            "address": f"Street {index}",
            "phone": f"021-{index:04d}",
            "email": f"contact{index}@example.com",
            "created_at": f"2024-01-01T00:00:{index:02d}+00:00",
        }
        for index in range(1, count + 1)
    ]


class FailingCollection(MemoryRemoteCollection):
    """Memory collection whose selected operations raise RemoteError."""

    def __init__(self, *args, fail_on=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.fail_on = set(fail_on)
        self.calls = []

    def _check(self, operation):
        self.calls.append(operation)
        if operation in self.fail_on:
            raise RemoteError(f"{operation} {self.name} refused")

    async def select(self, fields="*", options=None):
        self._check("select")
        return await super().select(fields, options)

    async def insert(self, record):
        self._check("insert")
        return await super().insert(record)

    async def update(self, record_id, changes):
        self._check("update")
        return await super().update(record_id, changes)

    async def delete(self, record_id):
        self._check("delete")
        return await super().delete(record_id)

    async def delete_where(self, field_name, value):
        self._check("delete_where")
        return await super().delete_where(field_name, value)


@pytest.fixture
def client_rows():
    return make_clients(25)


@pytest.fixture
def client_table(client_rows):
    return MemoryRemoteCollection("clients", client_rows)

