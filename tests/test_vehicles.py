import pytest

from tallerdb.dates import Date
from tallerdb.vehicles import Vehicle, edit_vehicle, prompt_vehicle


def scripted(answers):
    it = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(it)

    return ask, prompts


def sample():
    return Vehicle(
        plate="TEST001",
        brand="Marca",
        model="Modelo",
        year=2010,
        fault="Ruido en frenos",
        entry_date=Date(3, 4, 2023),
        vehicle_type=1,
        client_id=7,
        active=True,
    )


def test_record_size_matches_layout():
    assert Vehicle.RECORD_SIZE == 300
    assert len(sample().to_bytes()) == Vehicle.RECORD_SIZE


def test_round_trip():
    vehicle = sample()
    assert Vehicle.from_bytes(vehicle.to_bytes()) == vehicle


def test_round_trip_inactive():
    vehicle = sample()
    vehicle.active = False
    decoded = Vehicle.from_bytes(vehicle.to_bytes())
    assert decoded.active is False
    assert decoded.entry_date.is_same(Date(3, 4, 2023))


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Vehicle.from_bytes(b"\0" * 10)


def test_plate_is_truncated_to_field():
    vehicle = Vehicle(plate="TESTPLATE12345")
    assert len(vehicle.plate) == 9
    assert "TESTPLATE12345".startswith(vehicle.plate)


def test_out_of_range_year_raises():
    vehicle = sample()
    vehicle.year = 2**40
    with pytest.raises(ValueError):
        vehicle.to_bytes()


def test_describe_lines():
    lines = sample().describe().splitlines()
    assert lines[0] == "Patente: TEST001"
    assert "Marca: Marca" in lines
    assert lines[-1] == "Estado: Activo"


def test_describe_inactive():
    vehicle = sample()
    vehicle.active = False
    assert vehicle.describe().splitlines()[-1] == "Estado: Inactivo"


def test_prompt_vehicle():
    ask, prompts = scripted(
        ["TEST001", "Marca", "Modelo", "2010", "Ruido en frenos", "1", "7", "0"]
    )
    vehicle = prompt_vehicle(ask)
    assert vehicle.plate == "TEST001"
    assert vehicle.brand == "Marca"
    assert vehicle.year == 2010
    assert vehicle.fault == "Ruido en frenos"
    assert vehicle.client_id == 7
    assert vehicle.active is False
    assert len(prompts) == 8


def test_prompt_vehicle_rejects_non_number():
    ask, _ = scripted(["TEST001", "Marca", "Modelo", "dos mil"])
    with pytest.raises(ValueError):
        prompt_vehicle(ask)


def test_edit_vehicle_changes_fields():
    vehicle = sample()
    ask, _ = scripted(["1", "Otra", "3", "2015", "7", "0", "0"])
    lines = []
    result = edit_vehicle(vehicle, ask, lines.append)
    assert result is vehicle
    assert vehicle.brand == "Otra"
    assert vehicle.year == 2015
    assert vehicle.active is False
    assert vehicle.plate == "TEST001"


def test_edit_vehicle_invalid_option():
    vehicle = sample()
    ask, _ = scripted(["9", "0"])
    lines = []
    edit_vehicle(vehicle, ask, lines.append)
    assert "Opcion invalida. Intente de nuevo." in lines
    assert vehicle == sample()