# tallerdb

`tallerdb` holds the records of a small vehicle repair workshop as flat
binary files of fixed-size, little-endian records. It defines the record
types for employees, vehicles, repairs and invoices, a file class for
employees and one for invoices, and a helper that copies a record file
to a backup.

## Installation

```
pip install .
```

## Modules

- `tallerdb.dates`: `Date(day=1, month=1, year=2024)`, a frozen value with
  no calendar validation. `is_after(other)` and `is_same(other)` compare
  dates, `format()` gives `day/month/year` without zero padding, and
  `to_bytes()` / `Date.from_bytes(data)` pack and unpack it.
  `prompt_date(ask)` asks for day, month and year in turn.
- `tallerdb.people`: `Person` (first name, last name, DNI, phone) and
  `Employee`, which adds `employee_id`, `specialty` and `active`.
  `Employee.deactivate()` marks the employee as removed; `describe()`
  returns the details one field per line; `to_bytes()` /
  `Employee.from_bytes(data)` handle the record layout, and text fields
  that do not fit raise `ValueError`. The dialogues `prompt_person(ask)`,
  `edit_person(person, ask)`, `prompt_employee(ask)` and
  `edit_employee(employee, ask, out)` read answers through `ask`.
- `tallerdb.employee_file`: `EmployeeFile(path="empleados.dat")`.
  Iterating it yields every record, active or not. `add(employee)`
  stores the employee under `next_id()` and returns the stored record;
  `find(employee_id)` gives the position of an active employee or `None`;
  `get(employee_id)` returns that employee or `None`; `read(position)` and
  `write(employee, position)` raise `IndexError` for positions outside the
  file; `update(employee_id, employee)` and `deactivate(employee_id)`
  return `False` when no active employee has that ID; `active()` yields
  the employees not removed.
- `tallerdb.invoices`: `Invoice` (number, repair number, amount, delivery
  date, plate, client ID, total) with `describe()` and `summary()`, and
  `InvoiceFile(path="facturas.dat")` with `append(invoice)`,
  `find(number)`, `last()` and iteration. `prompt_invoice(ask)` asks for
  each field.
- `tallerdb.repairs`: `Repair` and `RepairStatus` (`PENDING`,
  `IN_PROGRESS`, `FINISHED`). A negative amount raises `ValueError`;
  plate, description and parts are cut to fit their fields.
- `tallerdb.vehicles`: `Vehicle`, with `describe()`, `to_bytes()` /
  `Vehicle.from_bytes(data)`, and the dialogues `prompt_vehicle(ask)` and
  `edit_vehicle(vehicle, ask, out)`.
- `tallerdb.backup`: `backup_file(source, destination)` copies a file
  byte for byte, replacing the destination, and returns its path.

## Example

```python
from tallerdb.employee_file import EmployeeFile
from tallerdb.people import Employee

staff = EmployeeFile("empleados.dat")
stored = staff.add(Employee(first_name="Ana", last_name="Gomez",
                            dni=1234, phone=5678, specialty="Frenos"))
print(staff.get(stored.employee_id).describe())

staff.deactivate(stored.employee_id)
print([e.employee_id for e in staff.active()])
```

The dialogue functions take an `ask` callable that receives a prompt and
returns the typed answer, and the editing menus an `out` callable that
receives each line to show, so they can be driven by `input` and `print`
at a terminal or by prepared answers in a script.

## What the package does not do

- There is no command and no interactive menu program; the dialogues are
  functions for a caller to wire up.
- Only employees and invoices have file classes. Vehicles and repairs
  have record formats but no file class to store, search or list them,
  and there is no client record at all.
- Repair entry does not check plates, clients or employees against any
  file, and there are no revenue or repair reports.