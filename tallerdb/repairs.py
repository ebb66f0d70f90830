"""Repairs carried out on vehicles, with their record layout."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import ClassVar

from tallerdb.dates import Date

_PLATE_SIZE = 10
_TEXT_SIZE = 200
_LAYOUT = struct.Struct(
    f"<i{_PLATE_SIZE}s2xii{Date.RECORD_SIZE}s{Date.RECORD_SIZE}s"
    f"{_TEXT_SIZE}s{_TEXT_SIZE}sfi?3x"
)


def _truncate(text: str, size: int) -> str:
    """Cut ``text`` so that its encoding leaves room for a terminating byte."""
    raw = text.encode("utf-8")
    if len(raw) < size:
        return text
    return raw[: size - 1].decode("utf-8", errors="ignore")


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class RepairStatus(enum.IntEnum):
    """Progress of a repair."""

    PENDING = 1
    IN_PROGRESS = 2
    FINISHED = 3

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    RepairStatus.PENDING: "PENDIENTE",
    RepairStatus.IN_PROGRESS: "EN CURSO",
    RepairStatus.FINISHED: "FINALIZADA",
}


@dataclass
class Repair:
    """A job on a vehicle for a client, assigned to an employee."""

    repair_id: int = 0
    plate: str = ""
    client_id: int = 0
    employee_id: int = 0
    entry_date: Date = field(default_factory=Date)
    delivery_date: Date = field(default_factory=Date)
    description: str = ""
    parts: str = ""
    amount: float = 0.0
    status: RepairStatus = RepairStatus.PENDING
    paid: bool = False

    RECORD_SIZE: ClassVar[int] = _LAYOUT.size

    def __post_init__(self) -> None:
        self.status = RepairStatus(self.status)
        if self.amount < 0:
            raise ValueError(f"amount must not be negative, got {self.amount}")
        self.plate = _truncate(self.plate, _PLATE_SIZE)
        self.description = _truncate(self.description, _TEXT_SIZE)
        self.parts = _truncate(self.parts, _TEXT_SIZE)

    def describe(self) -> str:
        """Return the repair's details, one field per line."""
        try:
            status = RepairStatus(self.status).label
        except ValueError:
            status = "DESCONOCIDO"
        return "\n".join(
            [
                "=== DATOS DE LA REPARACION ===",
                f"ID REPARACION: {self.repair_id}",
                f"PATENTE: {self.plate}",
                f"ID CLIENTE: {self.client_id}",
                f"ID EMPLEADO: {self.employee_id}",
                "FECHA INGRESO: ",
                self.entry_date.format(),
                "FECHA ENTREGA: ",
                self.delivery_date.format(),
                f"DESCRIPCION: {self.description}",
                f"REPUESTOS: {self.parts}",
                f"IMPORTE: ${self.amount:g}",
                f"ESTADO: {status}",
                f"PAGADO: {'SI' if self.paid else 'NO'}",
                "==============================",
            ]
        )

    def to_bytes(self) -> bytes:
        """Encode the repair as a fixed-size record."""
        try:
            return _LAYOUT.pack(
                self.repair_id,
                _truncate(self.plate, _PLATE_SIZE).encode("utf-8"),
                self.client_id,
                self.employee_id,
                self.entry_date.to_bytes(),
                self.delivery_date.to_bytes(),
                _truncate(self.description, _TEXT_SIZE).encode("utf-8"),
                _truncate(self.parts, _TEXT_SIZE).encode("utf-8"),
                self.amount,
                int(self.status),
                self.paid,
            )
        except (struct.error, OverflowError) as exc:
            raise ValueError(f"repair field out of range: {exc}") from None

    @classmethod
    def from_bytes(cls, data: bytes) -> Repair:
        """Decode a record written by :meth:`to_bytes`."""
        if len(data) != _LAYOUT.size:
            raise ValueError(
                f"a repair record is {_LAYOUT.size} bytes, got {len(data)}"
            )
        (
            repair_id,
            plate,
            client_id,
            employee_id,
            entry,
            delivery,
            description,
            parts,
            amount,
            status,
            paid,
        ) = _LAYOUT.unpack(data)
        return cls(
            repair_id=repair_id,
            plate=_decode(plate),
            client_id=client_id,
            employee_id=employee_id,
            entry_date=Date.from_bytes(entry),
            delivery_date=Date.from_bytes(delivery),
            description=_decode(description),
            parts=_decode(parts),
            amount=amount,
            status=RepairStatus(status),
            paid=paid,
        )