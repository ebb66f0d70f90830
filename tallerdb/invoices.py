"""Invoices issued for finished repairs, and the file that keeps them."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, ClassVar, Iterator, Optional, Union

from tallerdb.dates import Date, prompt_date

_PLATE_SIZE = 20
_LAYOUT = struct.Struct(f"<iii{Date.RECORD_SIZE}s{_PLATE_SIZE}sii")

Ask = Callable[[str], str]


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


@dataclass
class Invoice:
    """An invoice for a repair, with its amounts and delivery date."""

    number: int = 0
    repair_number: int = 0
    amount: int = 0
    delivery_date: Date = field(default_factory=Date)
    plate: str = ""
    client_id: int = 0
    total: int = 0

    RECORD_SIZE: ClassVar[int] = _LAYOUT.size

    def __post_init__(self) -> None:
        self.plate = _truncate(self.plate, _PLATE_SIZE)

    def describe(self) -> str:
        """Return the invoice's details, one field per line."""
        return "\n".join(
            [
                f"NUMERO DE FACTURA: {self.number}",
                f"NUMERO DE REPARACION: {self.repair_number}",
                f"IMPORTE: ${self.amount}",
                f"FECHA DE ENTREGA: {self.delivery_date.format()}",
                f"PATENTE: {self.plate}",
                f"ID CLIENTE: {self.client_id}",
                f"IMPORTE TOTAL: ${self.total}",
            ]
        )

    def summary(self) -> str:
        """Return a one-line summary with number, client and total."""
        return f"FACTURA #{self.number} - Cliente: {self.client_id} - Total: ${self.total}"

    def to_bytes(self) -> bytes:
        """Encode the invoice as a fixed-size record."""
        try:
            return _LAYOUT.pack(
                self.number,
                self.repair_number,
                self.amount,
                self.delivery_date.to_bytes(),
                _truncate(self.plate, _PLATE_SIZE).encode("utf-8"),
                self.client_id,
                self.total,
            )
        except struct.error as exc:
            raise ValueError(f"invoice field out of range: {exc}") from None

    @classmethod
    def from_bytes(cls, data: bytes) -> Invoice:
        """Decode a record written by :meth:`to_bytes`."""
        if len(data) != _LAYOUT.size:
            raise ValueError(
                f"an invoice record is {_LAYOUT.size} bytes, got {len(data)}"
            )
        number, repair_number, amount, date, plate, client_id, total = _LAYOUT.unpack(
            data
        )
        return cls(
            number=number,
            repair_number=repair_number,
            amount=amount,
            delivery_date=Date.from_bytes(date),
            plate=_decode(plate),
            client_id=client_id,
            total=total,
        )


class InvoiceFile:
    """Invoice records stored one after another in a binary file."""

    def __init__(self, path: Union[str, os.PathLike] = "facturas.dat") -> None:
        self.path = Path(path)

    def __iter__(self) -> Iterator[Invoice]:
        """Yield every complete invoice in file order."""
        try:
            handle = self.path.open("rb")
        except FileNotFoundError:
            return
        with handle:
            while len(chunk := handle.read(_LAYOUT.size)) == _LAYOUT.size:
                yield Invoice.from_bytes(chunk)

    def append(self, invoice: Invoice) -> None:
        """Add ``invoice`` at the end of the file, creating it if needed."""
        data = invoice.to_bytes()
        with self.path.open("ab") as handle:
            handle.write(data)

    def find(self, number: int) -> Optional[Invoice]:
        """Return the first invoice with this number, or None."""
        return next((invoice for invoice in self if invoice.number == number), None)

    def last(self) -> Optional[Invoice]:
        """Return the most recently written invoice, or None if there is none."""
        try:
            count = self.path.stat().st_size // _LAYOUT.size
        except FileNotFoundError:
            return None
        if count == 0:
            return None
        with self.path.open("rb") as handle:
            handle.seek((count - 1) * _LAYOUT.size)
            return Invoice.from_bytes(handle.read(_LAYOUT.size))


def prompt_invoice(ask: Ask) -> Invoice:
    """Ask for every field of a new invoice in turn."""
    number = _ask_int(ask, "Ingrese numero de factura: ")
    repair_number = _ask_int(ask, "Ingrese numero de reparacion: ")
    amount = _ask_int(ask, "Ingrese importe: ")
    delivery_date = prompt_date(ask)
    plate = ask("Ingrese patente: ").strip()
    client_id = _ask_int(ask, "Ingrese ID del cliente: ")
    total = _ask_int(ask, "Ingrese importe total: ")
    return Invoice(
        number=number,
        repair_number=repair_number,
        amount=amount,
        delivery_date=delivery_date,
        plate=plate,
        client_id=client_id,
        total=total,
    )