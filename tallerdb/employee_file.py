"""A file of fixed-size employee records."""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Iterator, Optional, Union

from tallerdb.people import Employee

_SIZE = Employee.RECORD_SIZE


class EmployeeFile:
    """Employee records stored one after another in a binary file."""

    def __init__(self, path: Union[str, os.PathLike] = "empleados.dat") -> None:
        self.path = Path(path)

    def __iter__(self) -> Iterator[Employee]:
        """Yield every complete record in file order, active or not."""
        try:
            handle = self.path.open("rb")
        except FileNotFoundError:
            return
        with handle:
            while len(chunk := handle.read(_SIZE)) == _SIZE:
                yield Employee.from_bytes(chunk)

    def _count(self) -> int:
        try:
            return self.path.stat().st_size // _SIZE
        except FileNotFoundError:
            return 0

    def add(self, employee: Employee) -> Employee:
        """Append ``employee`` under the next free ID and return the stored record."""
        record = replace(employee, employee_id=self.next_id())
        data = record.to_bytes()
        with self.path.open("ab") as handle:
            handle.write(data)
        return record

    def find(self, employee_id: int) -> Optional[int]:
        """Return the position of the active employee with this ID, or None."""
        for position, employee in enumerate(self):
            if employee.employee_id == employee_id and employee.active:
                return position
        return None

    def read(self, position: int) -> Employee:
        """Return the record at ``position``."""
        if position < 0 or position >= self._count():
            raise IndexError(f"no employee record at position {position}")
        with self.path.open("rb") as handle:
            handle.seek(position * _SIZE)
            return Employee.from_bytes(handle.read(_SIZE))

    def write(self, employee: Employee, position: int) -> None:
        """Overwrite the record at ``position`` with ``employee``."""
        if position < 0 or position >= self._count():
            raise IndexError(f"no employee record at position {position}")
        data = employee.to_bytes()
        with self.path.open("r+b") as handle:
            handle.seek(position * _SIZE)
            handle.write(data)

    def deactivate(self, employee_id: int) -> bool:
        """Mark the active employee with this ID as removed; False if not found."""
        position = self.find(employee_id)
        if position is None:
            return False
        employee = self.read(position)
        employee.deactivate()
        self.write(employee, position)
        return True

    def update(self, employee_id: int, employee: Employee) -> bool:
        """Replace the active employee with this ID, keeping the ID; False if not found."""
        position = self.find(employee_id)
        if position is None:
            return False
        self.write(replace(employee, employee_id=employee_id), position)
        return True

    def next_id(self) -> int:
        """Return one more than the highest ID on file, counting removed records."""
        return max((employee.employee_id for employee in self), default=0) + 1

    def active(self) -> Iterator[Employee]:
        """Yield the employees that have not been removed."""
        return (employee for employee in self if employee.active)

    def get(self, employee_id: int) -> Optional[Employee]:
        """Return the active employee with this ID, or None."""
        position = self.find(employee_id)
        return None if position is None else self.read(position)