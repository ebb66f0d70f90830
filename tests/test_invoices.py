import pytest

from tallerdb.dates import Date
from tallerdb.invoices import Invoice, InvoiceFile, prompt_invoice


def _invoice(number=7, total=900):
    return Invoice(
        number=number,
        repair_number=3,
        amount=800,
        delivery_date=Date(15, 6, 2024),
        plate="TEST001",
        client_id=3,
        total=total,
    )


def _answers(values):
    replies = iter(values)
    return lambda prompt: next(replies)


def test_default_invoice_fields():
    invoice = Invoice()
    assert invoice.number == 0
    assert invoice.plate == ""
    assert invoice.delivery_date == Date(1, 1, 2024)


def test_record_size_is_fixed():
    assert Invoice.RECORD_SIZE == 52
    assert len(_invoice().to_bytes()) == Invoice.RECORD_SIZE


def test_round_trip():
    invoice = _invoice()
    assert Invoice.from_bytes(invoice.to_bytes()) == invoice


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Invoice.from_bytes(b"\0" * 10)


def test_plate_is_truncated_to_fit():
    invoice = Invoice(plate="X" * 40)
    assert invoice.plate == "X" * 19


def test_to_bytes_rejects_out_of_range():
    with pytest.raises(ValueError):
        Invoice(number=2**40).to_bytes()


def test_summary():
    assert _invoice().summary() == "FACTURA #7 - Cliente: 3 - Total: $900"


def test_describe_lines():
    lines = _invoice().describe().splitlines()
    assert lines[0] == "NUMERO DE FACTURA: 7"
    assert "FECHA DE ENTREGA: 15/6/2024" in lines
    assert "PATENTE: TEST001" in lines
    assert lines[-1] == "IMPORTE TOTAL: $900"


def test_missing_file_is_empty(tmp_path):
    store = InvoiceFile(tmp_path / "facturas.dat")
    assert list(store) == []
    assert store.last() is None
    assert store.find(1) is None


def test_append_and_iterate(tmp_path):
    store = InvoiceFile(tmp_path / "facturas.dat")
    first, second = _invoice(1), _invoice(2)
    store.append(first)
    store.append(second)
    assert list(store) == [first, second]


def test_find_returns_first_match(tmp_path):
    store = InvoiceFile(tmp_path / "facturas.dat")
    store.append(_invoice(5, total=100))
    store.append(_invoice(5, total=200))
    found = store.find(5)
    assert found.total == 100
    assert store.find(6) is None


def test_last_returns_latest(tmp_path):
    store = InvoiceFile(tmp_path / "facturas.dat")
    store.append(_invoice(1))
    store.append(_invoice(9))
    assert store.last().number == 9


def test_last_ignores_partial_record(tmp_path):
    path = tmp_path / "facturas.dat"
    path.write_bytes(b"\0" * 5)
    assert InvoiceFile(path).last() is None


def test_prompt_invoice():
    ask = _answers(["7", "3", "800", "15", "6", "2024", " TEST001 ", "3", "900"])
    assert prompt_invoice(ask) == _invoice()


def test_prompt_invoice_rejects_non_number():
    with pytest.raises(ValueError):
        prompt_invoice(_answers(["seven"]))