"""
Render parsed DDL tables as either a data-file header line or an OSH schema.

    header line   ID:Integer not nullable|NAME:VarChar(50) nullable
    OSH schema    // FileStructure: file_format='delimited', header='false'
                  record { record_delim='\\n', delim='|', ... } (
                      ID: not nullable int64;
                      NAME: nullable string[max=50];
                  )
"""
from typing import Dict, Optional

from imam_cli.ddl_parser import TableSchema
from imam_cli.errors import UnknownTableError
from imam_cli.field_translator import to_header_field, to_osh_field

DEFAULT_DELIMITER = "|"
DATE_FORMAT = "%yyyy-%mm-%dd"
TIME_FORMAT = "%hh:%nn:%ss"
TIMESTAMP_FORMAT = f"{DATE_FORMAT} {TIME_FORMAT}"


def _lookup(tables: Dict[str, TableSchema], table: str) -> TableSchema:
    key = table.upper()
    if key not in tables:
        raise UnknownTableError(table)
    return tables[key]


def _delim(delimiter: Optional[str]) -> str:
    return delimiter if delimiter else DEFAULT_DELIMITER


def _file_structure(header: bool, escape: Optional[str]) -> str:
    line = "// FileStructure: file_format='delimited'"
    line += ", header='true'" if header else ", header='false'"
    if escape is not None:
        line += f', escape="{escape}"' if len(escape) > 1 else f", escape='{escape}'"
    return line


def render_header_line(tables: Dict[str, TableSchema], table: str,
                       delimiter: str = DEFAULT_DELIMITER) -> str:
    schema = _lookup(tables, table)
    return _delim(delimiter).join(to_header_field(f) for f in schema.fields)


def render_osh_schema(tables: Dict[str, TableSchema], table: str,
                      delimiter: str = DEFAULT_DELIMITER, header: bool = False,
                      escape: Optional[str] = None) -> str:
    schema = _lookup(tables, table)
    lines = [
        _file_structure(header, escape),
        "record { record_delim='\\n', delim='%s', final_delim=end, null_field='', "
        "date_format='%s', time_format='%s', timestamp_format='%s' } ("
        % (_delim(delimiter), DATE_FORMAT, TIME_FORMAT, TIMESTAMP_FORMAT),
    ]
    lines += [f"    {to_osh_field(f)}" for f in schema.fields]
    lines.append(")")
    return "\n".join(lines)


# ----------------------------------------------------
# No DDL available: every column is an untyped string
# ----------------------------------------------------
def _column_count(sample_line: str, delimiter: str) -> int:
    return len(sample_line.rstrip("\r\n").split(delimiter))


def default_header_line(sample_line: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    d = _delim(delimiter)
    return d.join(f"C{i}:NVarChar" for i in range(1, _column_count(sample_line, d) + 1))


def default_osh_schema(sample_line: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    d = _delim(delimiter)
    lines = [
        _file_structure(False, None),
        f"record {{ record_delim='\\n', delim='{d}', final_delim=end, null_field='' }} (",
    ]
    lines += [f"    C{i}: string[max=255];" for i in range(1, _column_count(sample_line, d) + 1)]
    lines.append(")")
    return "\n".join(lines)
