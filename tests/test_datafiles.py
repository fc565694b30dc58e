import pytest

from imam_cli.datafiles import add_header_to_data_file, create_osh_sidecar, first_line, table_name_for
from imam_cli.errors import UnknownTableError


def test_table_name_for():
    assert table_name_for("/data/in/Customer.dat") == "Customer"


def test_add_header_from_ddl(data_file, ddl_file):
    header = add_header_to_data_file(data_file, ddl_file)
    lines = data_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == header
    assert header.startswith("ID:Integer not nullable|")
    assert lines[1] == "1|Alice|10.50|2016-01-01"
    assert len(lines) == 3


def test_add_header_without_ddl(data_file):
    header = add_header_to_data_file(data_file)
    assert header == "C1:NVarChar|C2:NVarChar|C3:NVarChar|C4:NVarChar"
    assert first_line(data_file) == header


def test_colon_delimiter_is_reserved(data_file):
    with pytest.raises(ValueError):
        add_header_to_data_file(data_file, delimiter=":")
    assert first_line(data_file) == "1|Alice|10.50|2016-01-01"


def test_add_header_unknown_table(tmp_path, ddl_file):
    other = tmp_path / "products.dat"
    other.write_text("1|x\n", encoding="utf-8")
    with pytest.raises(UnknownTableError):
        add_header_to_data_file(other, ddl_file)
    assert other.read_text(encoding="utf-8") == "1|x\n"


def test_create_sidecar_from_ddl(data_file, ddl_file):
    sidecar = create_osh_sidecar(data_file, ddl_file, header=True)
    assert sidecar.name == "customer.dat.osh"
    text = sidecar.read_text(encoding="utf-8")
    assert "header='true'" in text
    assert "    BALANCE: nullable decimal[10,2];" in text


def test_create_sidecar_without_ddl(data_file):
    text = create_osh_sidecar(data_file).read_text(encoding="utf-8")
    assert text.count("string[max=255];") == 4


def test_add_header_keeps_crlf_body(tmp_path, ddl_file):
    p = tmp_path / "customer.dat"
    body = b"1|Alice|10.50|2016-01-01\r\n2|Bob||2016-02-01\r\n"
    p.write_bytes(body)
    header = add_header_to_data_file(p, ddl_file)
    assert p.read_bytes() == header.encode("utf-8") + b"\n" + body


def test_add_header_keeps_latin1_body(tmp_path):
    p = tmp_path / "customer.dat"
    body = b"1|Jos\xe9|10.50|2016-01-01\n"
    p.write_bytes(body)
    header = add_header_to_data_file(p)
    assert header == "C1:NVarChar|C2:NVarChar|C3:NVarChar|C4:NVarChar"
    assert p.read_bytes().endswith(b"\n" + body)
