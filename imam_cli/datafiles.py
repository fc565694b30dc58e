import logging
from pathlib import Path

from imam_cli.ddl_parser import parse_ddl
from imam_cli.schema_renderer import (
    DEFAULT_DELIMITER, default_header_line, default_osh_schema,
    render_header_line, render_osh_schema,
)


def table_name_for(data_file) -> str:
    """TableName.dat -> TableName"""
    return Path(data_file).stem


def first_line(data_file) -> str:
    with open(data_file, "rb") as f:
        return f.readline().decode("utf-8", errors="replace").rstrip("\r\n")


def build_header(data_file, ddl_file=None, delimiter=DEFAULT_DELIMITER) -> str:
    if delimiter == ":":
        raise ValueError("Cannot use ':' as a delimiter -- it is a reserved character for the schema definition.")
    if ddl_file:
        return render_header_line(parse_ddl(ddl_file), table_name_for(data_file), delimiter)
    return default_header_line(first_line(data_file), delimiter)


def add_header_to_data_file(data_file, ddl_file=None, delimiter=DEFAULT_DELIMITER) -> str:
    """Prepend an IMAM-importable header row to data_file and return it."""
    header = build_header(data_file, ddl_file, delimiter)
    path = Path(data_file)
    # body is copied byte for byte
    body = path.read_bytes()
    path.write_bytes(header.encode("utf-8") + b"\n" + body)
    logging.info("Injected header for table %s into %s", table_name_for(data_file), path)
    return header


def build_osh_schema(data_file, ddl_file=None, delimiter=DEFAULT_DELIMITER,
                     header=False, escape=None) -> str:
    if ddl_file:
        return render_osh_schema(parse_ddl(ddl_file), table_name_for(data_file),
                                 delimiter, header, escape)
    return default_osh_schema(first_line(data_file), delimiter)


def create_osh_sidecar(data_file, ddl_file=None, delimiter=DEFAULT_DELIMITER,
                       header=False, escape=None) -> Path:
    """Write <data_file>.osh next to the data file."""
    sidecar = Path(str(data_file) + ".osh")
    sidecar.write_text(build_osh_schema(data_file, ddl_file, delimiter, header, escape), encoding="utf-8")
    logging.info("Created side-car for table %s at %s", table_name_for(data_file), sidecar)
    return sidecar
