"""Tests for EmployeeEndpoint, driven directly without HTTP."""

import logging
from typing import AsyncIterator, List, Optional

import anyio
import pytest

from employee_api.app.core.exceptions import StoreError
from employee_api.app.schemas.employee import Employee
from employee_api.app.schemas.envelope import NOT_FOUND, Found, NotFound, is_found
from employee_api.app.services.employee_endpoint import EmployeeEndpoint
from employee_api.app.services.employee_store import InMemoryEmployeeStore


async def collect(items: AsyncIterator[Employee]) -> List[Employee]:
    return [item async for item in items]


class RecordingStore(InMemoryEmployeeStore):
    """In‑memory store that records the order of calls made on it."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.calls: List[str] = []

    async def find_all(self) -> AsyncIterator[Employee]:
        self.calls.append("find_all")
        async for employee in super().find_all():
            yield employee

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        self.calls.append("find_by_id")
        return await super().find_by_id(employee_id)

    async def save(self, employee: Employee) -> Employee:
        self.calls.append("save")
        return await super().save(employee)

    async def delete(self, employee: Employee) -> None:
        self.calls.append("delete")
        await super().delete(employee)


class FailingStore:
    async def find_all(self) -> AsyncIterator[Employee]:
        raise StoreError("disk on fire")
        yield  # pragma: no cover

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        raise StoreError("disk on fire")

    async def save(self, employee: Employee) -> Employee:
        raise StoreError("disk on fire")

    async def delete(self, employee: Employee) -> None:
        raise StoreError("disk on fire")


class TestListAll:
    def test_yields_all_records(self, endpoint: EmployeeEndpoint, store: InMemoryEmployeeStore) -> None:
        anyio.run(store.save, Employee(employee_name="Bob", department_code="D2", salary=500))
        employees = anyio.run(collect, endpoint.list_all())
        assert [e.employee_name for e in employees] == ["Alice", "Bob"]

    def test_empty_store(self) -> None:
        endpoint = EmployeeEndpoint(InMemoryEmployeeStore())
        assert anyio.run(collect, endpoint.list_all()) == []

    def test_each_call_is_a_fresh_sequence(self, endpoint: EmployeeEndpoint) -> None:
        first = anyio.run(collect, endpoint.list_all())
        second = anyio.run(collect, endpoint.list_all())
        assert first == second
        assert len(first) == 1


class TestGetById:
    def test_found(self, endpoint: EmployeeEndpoint, alice: Employee) -> None:
        result = anyio.run(endpoint.get_by_id, 1)
        assert result == Found(alice)
        assert is_found(result)

    def test_not_found(self, endpoint: EmployeeEndpoint) -> None:
        result = anyio.run(endpoint.get_by_id, 99)
        assert result is NOT_FOUND
        assert isinstance(result, NotFound)
        assert not is_found(result)

    def test_not_found_is_logged(self, endpoint: EmployeeEndpoint, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="employee_api.app.services.employee_endpoint")
        anyio.run(endpoint.get_by_id, 42)
        assert "Employee 42 not found" in caplog.text


class TestCreate:
    def test_confirmation_embeds_assigned_id(self, endpoint: EmployeeEndpoint) -> None:
        bob = Employee(employee_name="Bob", department_code="D3", salary=2000)
        message = anyio.run(endpoint.create, bob)
        assert message == "Employee created with Id: 2"

    def test_created_record_is_retrievable(self, endpoint: EmployeeEndpoint) -> None:
        bob = Employee(employee_name="Bob", department_code="D3", salary=2000)
        message = anyio.run(endpoint.create, bob)
        employee_id = int(message.rsplit(":", 1)[1])

        result = anyio.run(endpoint.get_by_id, employee_id)
        assert isinstance(result, Found)
        assert result.value.employee_id == employee_id
        assert result.value.model_dump(exclude={"employee_id"}) == bob.model_dump(exclude={"employee_id"})


class TestUpdate:
    def test_overwrites_mutable_fields(self, endpoint: EmployeeEndpoint) -> None:
        changes = Employee(employee_id=1, employee_name="Alice", department_code="D2", salary=1500)
        result = anyio.run(endpoint.update, changes)
        assert result == Found(Employee(employee_id=1, employee_name="Alice", department_code="D2", salary=1500))

        stored = anyio.run(endpoint.get_by_id, 1)
        assert stored == result

    def test_name_is_also_overwritten(self, endpoint: EmployeeEndpoint) -> None:
        changes = Employee(employee_id=1, employee_name="Alicia", department_code="D1", salary=1000)
        result = anyio.run(endpoint.update, changes)
        assert isinstance(result, Found)
        assert result.value.employee_name == "Alicia"
        assert result.value.employee_id == 1

    def test_unknown_id_does_not_create(self, endpoint: EmployeeEndpoint, store: InMemoryEmployeeStore) -> None:
        before = store.count()
        changes = Employee(employee_id=99, employee_name="Ghost", department_code="DX", salary=1)
        assert anyio.run(endpoint.update, changes) is NOT_FOUND
        assert store.count() == before
        assert anyio.run(endpoint.get_by_id, 99) is NOT_FOUND

    def test_missing_id_does_not_create(self, endpoint: EmployeeEndpoint, store: InMemoryEmployeeStore) -> None:
        changes = Employee(employee_name="Nobody", department_code="DX", salary=1)
        assert anyio.run(endpoint.update, changes) is NOT_FOUND
        assert store.count() == 1

    def test_save_runs_after_find(self) -> None:
        store = RecordingStore(seed=[Employee(employee_id=1, employee_name="A", department_code="D", salary=1)])
        endpoint = EmployeeEndpoint(store)
        anyio.run(endpoint.update, Employee(employee_id=1, employee_name="B", department_code="E", salary=2))
        assert store.calls == ["find_by_id", "save"]

    def test_no_save_when_absent(self) -> None:
        store = RecordingStore()
        endpoint = EmployeeEndpoint(store)
        anyio.run(endpoint.update, Employee(employee_id=5, employee_name="B", department_code="E", salary=2))
        assert store.calls == ["find_by_id"]


class TestDelete:
    def test_echoes_pre_delete_snapshot(self, endpoint: EmployeeEndpoint, alice: Employee) -> None:
        result = anyio.run(endpoint.delete, 1)
        assert result == Found(alice)
        assert anyio.run(endpoint.get_by_id, 1) is NOT_FOUND

    def test_unknown_id(self, endpoint: EmployeeEndpoint, store: InMemoryEmployeeStore) -> None:
        assert anyio.run(endpoint.delete, 99) is NOT_FOUND
        assert store.count() == 1

    def test_delete_runs_after_find(self) -> None:
        store = RecordingStore(seed=[Employee(employee_id=3, employee_name="A", department_code="D", salary=1)])
        endpoint = EmployeeEndpoint(store)
        anyio.run(endpoint.delete, 3)
        assert store.calls == ["find_by_id", "delete"]


class TestDeferredExecution:
    def test_coroutines_do_nothing_until_awaited(self) -> None:
        store = RecordingStore(seed=[Employee(employee_id=1, employee_name="A", department_code="D", salary=1)])
        endpoint = EmployeeEndpoint(store)

        pending = [
            endpoint.get_by_id(1),
            endpoint.create(Employee(employee_name="B")),
            endpoint.update(Employee(employee_id=1, employee_name="C")),
            endpoint.delete(1),
        ]
        assert store.calls == []
        for coro in pending:
            coro.close()
        assert store.count() == 1

    def test_list_all_pulls_only_when_iterated(self) -> None:
        store = RecordingStore(seed=[Employee(employee_id=1, employee_name="A")])
        endpoint = EmployeeEndpoint(store)

        employees = endpoint.list_all()
        assert store.calls == []
        assert len(anyio.run(collect, employees)) == 1
        assert store.calls == ["find_all"]


class TestStoreFailures:
    def test_failures_propagate(self) -> None:
        endpoint = EmployeeEndpoint(FailingStore())
        with pytest.raises(StoreError):
            anyio.run(endpoint.get_by_id, 1)
        with pytest.raises(StoreError):
            anyio.run(endpoint.delete, 1)
        with pytest.raises(StoreError):
            anyio.run(endpoint.create, Employee(employee_name="X"))
        with pytest.raises(StoreError):
            anyio.run(collect, endpoint.list_all())


def test_scenario(endpoint: EmployeeEndpoint, alice: Employee) -> None:
    assert anyio.run(endpoint.get_by_id, 1) == Found(alice)
    assert anyio.run(endpoint.get_by_id, 99) is NOT_FOUND

    updated = anyio.run(
        endpoint.update,
        Employee(employee_id=1, employee_name="Alice", department_code="D2", salary=1500),
    )
    assert isinstance(updated, Found)
    assert (updated.value.department_code, updated.value.salary, updated.value.employee_name) == ("D2", 1500, "Alice")

    deleted = anyio.run(endpoint.delete, 1)
    assert deleted == Found(updated.value)
    assert anyio.run(endpoint.get_by_id, 1) is NOT_FOUND
