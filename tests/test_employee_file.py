import pytest

from tallerdb.employee_file import EmployeeFile
from tallerdb.people import Employee


def _employee(name, specialty="Motor"):
    return Employee(
        first_name=name, last_name="Perez", dni=100, phone=200, specialty=specialty
    )


@pytest.fixture
def store(tmp_path):
    return EmployeeFile(tmp_path / "empleados.dat")


def test_missing_file_is_empty(store):
    assert list(store) == []
    assert store.next_id() == 1
    assert store.find(1) is None
    assert store.get(1) is None


def test_add_assigns_increasing_ids(store):
    first = store.add(_employee("Ana"))
    second = store.add(_employee("Luis"))
    assert (first.employee_id, second.employee_id) == (1, 2)
    assert [e.first_name for e in store] == ["Ana", "Luis"]
    assert store.next_id() == 3


def test_find_and_read(store):
    store.add(_employee("Ana"))
    store.add(_employee("Luis"))
    position = store.find(2)
    assert position == 1
    assert store.read(position).first_name == "Luis"


def test_read_out_of_range(store):
    store.add(_employee("Ana"))
    with pytest.raises(IndexError):
        store.read(1)
    with pytest.raises(IndexError):
        store.read(-1)


def test_write_out_of_range(store):
    with pytest.raises(IndexError):
        store.write(_employee("Ana"), 0)


def test_deactivate_hides_employee(store):
    store.add(_employee("Ana"))
    store.add(_employee("Luis"))
    assert store.deactivate(1) is True
    assert store.find(1) is None
    assert store.get(1) is None
    assert [e.first_name for e in store.active()] == ["Luis"]
    assert store.read(0).active is False
    assert store.deactivate(1) is False


def test_next_id_counts_removed_records(store):
    store.add(_employee("Ana"))
    store.add(_employee("Luis"))
    store.deactivate(2)
    assert store.next_id() == 3


def test_update_keeps_id(store):
    store.add(_employee("Ana"))
    changed = _employee("Ana", specialty="Frenos")
    changed.employee_id = 99
    assert store.update(1, changed) is True
    stored = store.get(1)
    assert stored.specialty == "Frenos"
    assert stored.employee_id == 1
    assert len(list(store)) == 1


def test_update_unknown_id(store):
    store.add(_employee("Ana"))
    assert store.update(5, _employee("Luis")) is False
    assert [e.first_name for e in store] == ["Ana"]


def test_trailing_partial_record_is_ignored(store):
    store.add(_employee("Ana"))
    with store.path.open("ab") as handle:
        handle.write(b"\x01\x02\x03")
    assert [e.first_name for e in store] == ["Ana"]
    with pytest.raises(IndexError):
        store.read(1)


def test_file_size_is_whole_records(store):
    store.add(_employee("Ana"))
    store.add(_employee("Luis"))
    assert store.path.stat().st_size == 2 * Employee.RECORD_SIZE