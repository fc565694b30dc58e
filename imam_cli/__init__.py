from imam_cli.ddl_parser import TableSchema, extract_columns, extract_statements, parse_ddl, parse_ddl_text
from imam_cli.errors import (
    ImamError, ImportAreaError, MalformedDDLError, UnknownBridgeError,
    UnknownTableError, UnsupportedTypeError,
)
from imam_cli.field_translator import TypedField, parse_column, translate
from imam_cli.schema_renderer import (
    default_header_line, default_osh_schema, render_header_line, render_osh_schema,
)
from imam_cli.type_mapper import HEADER, OSH, map_type

__version__ = "0.1.0"
