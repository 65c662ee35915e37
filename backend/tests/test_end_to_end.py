from __future__ import annotations

import anyio

from builders import Director, PersonBuilder
from datarepo.db.dynamodb.store import DynamoStoreClient
from datarepo.persistence.entities import Person
from datarepo.persistence.repository import DynamoDbDataRepository
from datarepo.persistence.result import Result, ResultStatus
from fakes import FakeResource, InMemoryTable


def _repo() -> tuple[DynamoDbDataRepository, InMemoryTable]:
    table = InMemoryTable()
    store = DynamoStoreClient(resource=FakeResource(table))
    return DynamoDbDataRepository(store=store, table_name="people"), table


def test_upsert_then_get_returns_equal_entity():
    repo, table = _repo()
    person = PersonBuilder.create().build()

    assert anyio.run(repo.upsert, person) == Result.success()
    assert (f"PERSON#{person.entity_id}", f"CLIENT#{person.client_id}") in table.items

    result = anyio.run(repo.get, Person, f"PERSON#{person.entity_id}", f"CLIENT#{person.client_id}")

    assert result.status is ResultStatus.OK
    assert result.value == person
    assert result.value.gsi1pk == person.gsi1pk
    assert result.value.gsi1sk == person.gsi1sk


def test_upsert_overwrites_existing_item():
    repo, table = _repo()
    person = PersonBuilder.create().build()
    renamed = person.model_copy(update={"name": "Carole B."})

    anyio.run(repo.upsert, person)
    anyio.run(repo.upsert, renamed)

    assert len(table.items) == 1
    assert anyio.run(repo.get, Person, person.pk, person.sk) == Result.success(renamed)


def test_get_many_by_partition():
    repo, _ = _repo()
    person = PersonBuilder.create(Director.BOB).build()
    anyio.run(repo.upsert, person)

    assert anyio.run(repo.get_many, Person, person.pk) == Result.success([person])
    assert anyio.run(repo.get_many, Person, "PERSON#missing") == Result.not_found()


def test_delete_is_idempotent():
    repo, table = _repo()
    person = PersonBuilder.create().build()
    anyio.run(repo.upsert, person)

    assert anyio.run(repo.delete, person.pk, person.sk) == Result.success()
    assert table.items == {}
    assert anyio.run(repo.delete, person.pk, person.sk) == Result.success()
    assert anyio.run(repo.delete, "PERSON#never", "CLIENT#written") == Result.success()
    assert anyio.run(repo.get, Person, person.pk, person.sk) == Result.not_found()
