"""
SQL type -> file schema type lookups.

Two target dialects share the same set of recognised SQL types:
  HEADER  header line injected into a data file  (VARCHAR(50) -> VarChar(50))
  OSH     OSH schema sidecar                      (VARCHAR(50) -> string[max=50])
"""
from types import MappingProxyType
from imam_cli.errors import MalformedDDLError, UnsupportedTypeError

HEADER = "header"
OSH = "osh"

# http://www.ibm.com/support/knowledgecenter/SSZJPZ_11.5.0/com.ibm.swg.im.iis.conn.s3.usage.doc/topics/r_metadata_for_rcp.html
HEADER_TYPES = MappingProxyType({
    "CHAR": "Char",
    "DATE": "Date",
    "DECIMAL": "Numeric",
    "INTEGER": "Integer",
    "TIME": "Time",
    "TIMESTAMP": "Timestamp",
    "VARCHAR": "VarChar",
})

OSH_TYPES = MappingProxyType({
    "CHAR": "string",
    "DATE": "date",
    "DECIMAL": "decimal",
    "INTEGER": "int64",
    "TIME": "time",
    "TIMESTAMP": "timestamp",
    "VARCHAR": "string",
})

SUPPORTED_TYPES = frozenset(HEADER_TYPES)


def split_type(sql_type: str):
    """'DECIMAL(5,2)' -> ('DECIMAL', '5,2'); 'DATE' -> ('DATE', '')"""
    i = sql_type.find("(")
    if i <= 0:
        return sql_type, ""
    j = sql_type.find(")", i)
    if j < 0:
        raise MalformedDDLError("Unclosed type parameters", sql_type)
    params = sql_type[i + 1:j]
    return sql_type[:i], params


def _base(sql_type: str) -> str:
    base = split_type(sql_type)[0].upper()
    if base not in SUPPORTED_TYPES:
        raise UnsupportedTypeError(base)
    return base


def header_type(sql_type: str) -> str:
    base = _base(sql_type)
    _, params = split_type(sql_type)
    return HEADER_TYPES[base] + (f"({params})" if params else "")


def osh_type(sql_type: str) -> str:
    base = _base(sql_type)
    _, params = split_type(sql_type)
    token = OSH_TYPES[base]
    if not params:
        return token
    if token == "string":
        return f"{token}[max={params}]"
    return f"{token}[{params}]"


def map_type(sql_type: str, dialect: str = HEADER) -> str:
    if dialect == HEADER:
        return header_type(sql_type)
    if dialect == OSH:
        return osh_type(sql_type)
    raise ValueError(f"Unknown schema dialect: {dialect}")
