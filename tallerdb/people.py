"""People and employees of the workshop, with their record layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, ClassVar

_NAME_SIZE = 50
_SPECIALTY_SIZE = 50
_EMPLOYEE_LAYOUT = struct.Struct(
    f"<{_NAME_SIZE}s{_NAME_SIZE}siii{_SPECIALTY_SIZE}s?x"
)

Ask = Callable[[str], str]
Out = Callable[[str], None]


def _encode(text: str, size: int, field: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) >= size:
        raise ValueError(f"{field} must be shorter than {size} bytes")
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _ask_word(ask: Ask, prompt: str) -> str:
    words = ask(prompt).split()
    if not words:
        raise ValueError(f"an answer is required for {prompt.strip()!r}")
    return words[0]


def _ask_int(ask: Ask, prompt: str) -> int:
    word = _ask_word(ask, prompt)
    try:
        return int(word)
    except ValueError:
        raise ValueError(
            f"expected a whole number for {prompt.strip()!r}, got {word!r}"
        ) from None


@dataclass
class Person:
    """Name, national identity number and phone of a person."""

    first_name: str = ""
    last_name: str = ""
    dni: int = 0
    phone: int = 0

    def describe(self) -> str:
        """Return the person's details, one field per line."""
        return "\n".join(
            [
                f"NOMBRE: {self.first_name}",
                f"APELLIDO: {self.last_name}",
                f"DNI: {self.dni}",
                f"TELEFONO: {self.phone}",
            ]
        )


@dataclass
class Employee(Person):
    """A person working at the workshop, identified by a numeric ID."""

    employee_id: int = 0
    specialty: str = ""
    active: bool = True

    RECORD_SIZE: ClassVar[int] = _EMPLOYEE_LAYOUT.size

    def describe(self) -> str:
        """Return the employee's details, one field per line."""
        return "\n".join(
            [
                f"ID Empleado: {self.employee_id}",
                f"Nombre: {self.first_name}",
                f"Apellido: {self.last_name}",
                f"DNI: {self.dni}",
                f"Telefono: {self.phone}",
                f"Especialidad: {self.specialty}",
                f"Estado: {'Activo' if self.active else 'Baja'}",
            ]
        )

    def deactivate(self) -> None:
        """Mark the employee as no longer active."""
        self.active = False

    def to_bytes(self) -> bytes:
        """Encode the employee as a fixed-size record."""
        try:
            return _EMPLOYEE_LAYOUT.pack(
                _encode(self.first_name, _NAME_SIZE, "first name"),
                _encode(self.last_name, _NAME_SIZE, "last name"),
                self.dni,
                self.phone,
                self.employee_id,
                _encode(self.specialty, _SPECIALTY_SIZE, "specialty"),
                self.active,
            )
        except struct.error as exc:
            raise ValueError(f"employee field out of range: {exc}") from None

    @classmethod
    def from_bytes(cls, data: bytes) -> Employee:
        """Decode a record written by :meth:`to_bytes`."""
        if len(data) != _EMPLOYEE_LAYOUT.size:
            raise ValueError(
                f"an employee record is {_EMPLOYEE_LAYOUT.size} bytes, got {len(data)}"
            )
        first, last, dni, phone, employee_id, specialty, active = (
            _EMPLOYEE_LAYOUT.unpack(data)
        )
        return cls(
            first_name=_decode(first),
            last_name=_decode(last),
            dni=dni,
            phone=phone,
            employee_id=employee_id,
            specialty=_decode(specialty),
            active=active,
        )


def prompt_person(ask: Ask) -> Person:
    """Ask for a person's name, surname, DNI and phone."""
    first_name = _ask_word(ask, "INGRESAR NOMBRE: ")
    last_name = _ask_word(ask, "INGRESAR APELLIDO: ")
    dni = _ask_int(ask, "INGRESAR DNI: ")
    phone = _ask_int(ask, "INGRESAR TELEFONO: ")
    return Person(first_name, last_name, dni, phone)


def edit_person(person: Person, ask: Ask) -> Person:
    """Ask for a new name, surname and phone, updating ``person`` in place."""
    person.first_name = ask(f"Nuevo nombre [{person.first_name}]: ").strip()
    person.last_name = ask(f"Nuevo apellido [{person.last_name}]: ").strip()
    person.phone = _ask_int(ask, f"Nuevo Telefono [{person.phone}]: ")
    return person


def prompt_employee(ask: Ask) -> Employee:
    """Ask for the details of a new, active employee with no ID yet."""
    first_name = _ask_word(ask, "INGRESE EL NOMBRE: ")
    last_name = _ask_word(ask, "INGRESE EL APELLIDO: ")
    dni = _ask_int(ask, "INGRESE DNI: ")
    phone = _ask_int(ask, "INGRESE TELEFONO: ")
    specialty = _ask_word(ask, "INGRESE ESPECIALIDAD: ")
    return Employee(
        first_name=first_name,
        last_name=last_name,
        dni=dni,
        phone=phone,
        specialty=specialty,
        active=True,
    )


def edit_employee(employee: Employee, ask: Ask, out: Out) -> Employee:
    """Run the field editing menu until the user saves, updating in place."""
    while True:
        for line in (
            "",
            "=== EDITAR EMPLEADO ===",
            f"1. Editar nombre (actual: {employee.first_name})",
            f"2. Editar apellido (actual: {employee.last_name})",
            f"3. Editar telefono (actual: {employee.phone})",
            f"4. Editar especialidad (actual: {employee.specialty})",
            "5. Salir y guardar cambios",
            "---------------------------------",
            f"DNI [{employee.dni}] (NO MODIFICABLE)",
        ):
            out(line)
        choice = ask("Seleccione una opcion: ").strip()
        if choice == "1":
            employee.first_name = _ask_word(ask, "Nuevo nombre: ")
        elif choice == "2":
            employee.last_name = _ask_word(ask, "Nuevo apellido: ")
        elif choice == "3":
            employee.phone = _ask_int(ask, "Nuevo telefono: ")
        elif choice == "4":
            employee.specialty = _ask_word(ask, "Nueva especialidad: ")
        elif choice == "5":
            return employee
        else:
            out("Opcion invalida, intente nuevamente.")