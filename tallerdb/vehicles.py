"""Vehicles brought to the workshop, with their record layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Callable, ClassVar

from tallerdb.dates import Date

_PLATE_SIZE = 10
_BRAND_SIZE = 30
_MODEL_SIZE = 30
_FAULT_SIZE = 200
_LAYOUT = struct.Struct(
    f"<{_PLATE_SIZE}s{_BRAND_SIZE}s{_MODEL_SIZE}s2xi{_FAULT_SIZE}s"
    f"{Date.RECORD_SIZE}sii?3x"
)

Ask = Callable[[str], str]
Out = Callable[[str], None]

VEHICLE_TYPES_HINT = "(1=Auto 2=Moto 3=Camioneta 4=Camion)"


def _truncate(text: str, size: int) -> str:
    """Cut ``text`` so that its encoding leaves room for a terminating byte."""
    raw = text.encode("utf-8")
    if len(raw) < size:
        return text
    return raw[: size - 1].decode("utf-8", errors="ignore")


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _ask_int(ask: Ask, prompt: str) -> int:
    words = ask(prompt).split()
    if not words:
        raise ValueError(f"expected a whole number for {prompt.strip()!r}")
    try:
        return int(words[0])
    except ValueError:
        raise ValueError(
            f"expected a whole number for {prompt.strip()!r}, got {words[0]!r}"
        ) from None


def _ask_line(ask: Ask, prompt: str) -> str:
    return ask(prompt).rstrip("\r\n")


@dataclass
class Vehicle:
    """A vehicle identified by its plate, owned by a client."""

    plate: str = ""
    brand: str = ""
    model: str = ""
    year: int = 0
    fault: str = ""
    entry_date: Date = field(default_factory=Date)
    vehicle_type: int = 0
    client_id: int = 0
    active: bool = True

    RECORD_SIZE: ClassVar[int] = _LAYOUT.size

    def __post_init__(self) -> None:
        self.plate = _truncate(self.plate, _PLATE_SIZE)
        self.brand = _truncate(self.brand, _BRAND_SIZE)
        self.model = _truncate(self.model, _MODEL_SIZE)
        self.fault = _truncate(self.fault, _FAULT_SIZE)

    def describe(self) -> str:
        """Return the vehicle's details, one field per line."""
        return "\n".join(
            [
                f"Patente: {self.plate}",
                f"Marca: {self.brand}",
                f"Modelo: {self.model}",
                f"Anio: {self.year}",
                f"Falla: {self.fault}",
                f"Tipo de vehiculo: {self.vehicle_type}",
                f"ID Cliente: {self.client_id}",
                f"Estado: {'Activo' if self.active else 'Inactivo'}",
            ]
        )

    def to_bytes(self) -> bytes:
        """Encode the vehicle as a fixed-size record."""
        try:
            return _LAYOUT.pack(
                _truncate(self.plate, _PLATE_SIZE).encode("utf-8"),
                _truncate(self.brand, _BRAND_SIZE).encode("utf-8"),
                _truncate(self.model, _MODEL_SIZE).encode("utf-8"),
                self.year,
                _truncate(self.fault, _FAULT_SIZE).encode("utf-8"),
                self.entry_date.to_bytes(),
                self.vehicle_type,
                self.client_id,
                self.active,
            )
        except struct.error as exc:
            raise ValueError(f"vehicle field out of range: {exc}") from None

    @classmethod
    def from_bytes(cls, data: bytes) -> Vehicle:
        """Decode a record written by :meth:`to_bytes`."""
        if len(data) != _LAYOUT.size:
            raise ValueError(
                f"a vehicle record is {_LAYOUT.size} bytes, got {len(data)}"
            )
        (
            plate,
            brand,
            model,
            year,
            fault,
            entry,
            vehicle_type,
            client_id,
            active,
        ) = _LAYOUT.unpack(data)
        return cls(
            plate=_decode(plate),
            brand=_decode(brand),
            model=_decode(model),
            year=year,
            fault=_decode(fault),
            entry_date=Date.from_bytes(entry),
            vehicle_type=vehicle_type,
            client_id=client_id,
            active=active,
        )


def prompt_vehicle(ask: Ask) -> Vehicle:
    """Ask for every field of a new vehicle in turn."""
    plate = _ask_line(ask, "Ingrese patente: ")
    brand = _ask_line(ask, "Ingrese marca: ")
    model = _ask_line(ask, "Ingrese modelo: ")
    year = _ask_int(ask, "Ingrese anio: ")
    fault = _ask_line(ask, "Ingrese falla o servicio: ")
    vehicle_type = _ask_int(ask, f"Ingrese tipo de vehiculo {VEHICLE_TYPES_HINT}: ")
    client_id = _ask_int(ask, "Ingrese ID del cliente: ")
    active = _ask_int(ask, "Ingrese estado (1 = activo, 0 = inactivo): ") != 0
    return Vehicle(
        plate=plate,
        brand=brand,
        model=model,
        year=year,
        fault=fault,
        vehicle_type=vehicle_type,
        client_id=client_id,
        active=active,
    )


def edit_vehicle(vehicle: Vehicle, ask: Ask, out: Out) -> Vehicle:
    """Run the field editing menu until the user leaves, updating in place."""
    while True:
        for line in (
            "",
            "Seleccione el campo a modificar:",
            f"1. Marca [{vehicle.brand}]",
            f"2. Modelo [{vehicle.model}]",
            f"3. Anio [{vehicle.year}]",
            f"4. Falla/Servicio [{vehicle.fault}]",
            f"5. Tipo de Vehiculo [{vehicle.vehicle_type}]",
            f"6. ID Cliente [{vehicle.client_id}]",
            f"7. Estado [{'Activo' if vehicle.active else 'Inactivo'}]",
            "0. Salir",
        ):
            out(line)
        choice = ask("Opcion: ").strip()
        if choice == "1":
            vehicle.brand = _truncate(_ask_line(ask, "Nueva marca: "), _BRAND_SIZE)
        elif choice == "2":
            vehicle.model = _truncate(_ask_line(ask, "Nuevo modelo: "), _MODEL_SIZE)
        elif choice == "3":
            vehicle.year = _ask_int(ask, "Nuevo anio: ")
        elif choice == "4":
            vehicle.fault = _truncate(
                _ask_line(ask, "Nueva falla/servicio: "), _FAULT_SIZE
            )
        elif choice == "5":
            vehicle.vehicle_type = _ask_int(
                ask, f"Nuevo tipo de vehiculo {VEHICLE_TYPES_HINT}: "
            )
        elif choice == "6":
            vehicle.client_id = _ask_int(ask, "Nuevo ID Cliente: ")
        elif choice == "7":
            vehicle.active = _ask_int(ask, "Nuevo estado (1=Activo, 0=Inactivo): ") != 0
        elif choice == "0":
            return vehicle
        else:
            out("Opcion invalida. Intente de nuevo.")