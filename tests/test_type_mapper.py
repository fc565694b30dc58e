import pytest

from imam_cli.errors import MalformedDDLError, UnsupportedTypeError
from imam_cli.type_mapper import HEADER, OSH, SUPPORTED_TYPES, map_type, split_type

HEADER_EXPECTED = {
    "CHAR": "Char", "DATE": "Date", "DECIMAL": "Numeric", "INTEGER": "Integer",
    "TIME": "Time", "TIMESTAMP": "Timestamp", "VARCHAR": "VarChar",
}
OSH_EXPECTED = {
    "CHAR": "string", "DATE": "date", "DECIMAL": "decimal", "INTEGER": "int64",
    "TIME": "time", "TIMESTAMP": "timestamp", "VARCHAR": "string",
}


def test_supported_vocabulary():
    assert SUPPORTED_TYPES == set(HEADER_EXPECTED)


@pytest.mark.parametrize("sql_type", sorted(HEADER_EXPECTED))
def test_plain_tokens_both_dialects(sql_type):
    assert map_type(sql_type, HEADER) == HEADER_EXPECTED[sql_type]
    assert map_type(sql_type, OSH) == OSH_EXPECTED[sql_type]


def test_case_insensitive():
    assert map_type("varchar", HEADER) == "VarChar"
    assert map_type("Timestamp", OSH) == "timestamp"


def test_header_suffix_is_verbatim():
    assert map_type("VARCHAR(255)", HEADER) == "VarChar(255)"
    assert map_type("DECIMAL(5,2)", HEADER) == "Numeric(5,2)"


def test_osh_suffix():
    assert map_type("VARCHAR(255)", OSH) == "string[max=255]"
    assert map_type("CHAR(1)", OSH) == "string[max=1]"
    assert map_type("DECIMAL(5,2)", OSH) == "decimal[5,2]"
    assert map_type("TIMESTAMP(6)", OSH) == "timestamp[6]"


@pytest.mark.parametrize("dialect", [HEADER, OSH])
def test_unsupported_type_names_offender(dialect):
    with pytest.raises(UnsupportedTypeError) as exc:
        map_type("nvarchar(20)", dialect)
    assert exc.value.sql_type == "NVARCHAR"
    assert "NVARCHAR" in str(exc.value)


def test_unknown_dialect():
    with pytest.raises(ValueError):
        map_type("DATE", "xml")


def test_split_type():
    assert split_type("DECIMAL(5,2)") == ("DECIMAL", "5,2")
    assert split_type("DATE") == ("DATE", "")


def test_split_type_unclosed_params():
    with pytest.raises(MalformedDDLError):
        split_type("DECIMAL(10")
