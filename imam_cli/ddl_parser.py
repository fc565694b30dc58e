import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from imam_cli.errors import MalformedDDLError
from imam_cli.field_translator import TypedField, parse_column

CREATE_TABLE = "CREATE TABLE"
PRIMARY_KEY = "PRIMARY KEY"
_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TableSchema:
    table: str
    columns: Tuple[str, ...]

    @property
    def fields(self) -> List[TypedField]:
        return [parse_column(c) for c in self.columns]

    def __len__(self):
        return len(self.columns)


# ----------------------------------------------------
# Statements
# ----------------------------------------------------
def extract_statements(ddl_text: str) -> List[str]:
    """
    Split DDL text into one normalised string per CREATE TABLE statement.

    Lines are trimmed and upper-cased, blank lines and '--' comments are
    dropped, and whitespace runs collapse to a single space. Lines are
    concatenated without a separator, so a statement spanning several lines
    reads 'CREATE TABLE T (A INTEGER,B DATE);'. Anything before the first
    CREATE TABLE is ignored.
    """
    statements = []
    current = ""
    for raw in ddl_text.splitlines():
        line = raw.strip().upper()
        if line.startswith(CREATE_TABLE):
            if current.startswith(CREATE_TABLE):
                statements.append(current)
            current = _WS_RE.sub(" ", line)
        elif line and not line.startswith("--"):
            current += _WS_RE.sub(" ", line)
    if current.startswith(CREATE_TABLE):
        statements.append(current)
    return statements


# ----------------------------------------------------
# Columns
# ----------------------------------------------------
def _split_top_level(body: str, statement: str) -> List[str]:
    """Split on commas that are not inside a parenthesis group, e.g. DECIMAL(5,2)."""
    parts, buf, depth = [], [], 0
    for ch in body:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise MalformedDDLError("Unbalanced ')' in column definitions", statement)
        if ch == "," and depth == 0:
            parts.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    if depth != 0:
        raise MalformedDDLError("Unclosed '(' in column definitions", statement)
    parts.append("".join(buf))
    return parts


def extract_columns(statement: str) -> TableSchema:
    """
    Table name and raw column fragments of a single CREATE TABLE statement.

    The definition body runs from the first '(' to the LAST ')', so any
    table-level clause after the closing paren is dropped. PRIMARY KEY
    clauses are not columns and are skipped.
    """
    start = statement.find("(")
    end = statement.rfind(")")
    if start < 0 or end < start:
        raise MalformedDDLError("CREATE TABLE without a (...) column list", statement)

    table = statement[len(CREATE_TABLE) + 1:start].strip()
    if not table:
        raise MalformedDDLError("CREATE TABLE without a table name", statement)

    columns = []
    for frag in _split_top_level(statement[start + 1:end], statement):
        frag = frag.strip()
        if not frag or frag.upper().startswith(PRIMARY_KEY):
            continue
        columns.append(frag)
    return TableSchema(table=table, columns=tuple(columns))


# ----------------------------------------------------
# Whole files
# ----------------------------------------------------
def parse_ddl_text(ddl_text: str) -> Dict[str, TableSchema]:
    """{TABLE: TableSchema} for every CREATE TABLE in the text."""
    tables = {}
    for stmt in extract_statements(ddl_text):
        schema = extract_columns(stmt)
        tables[schema.table.upper()] = schema
    return tables


def read_ddl(path) -> str:
    raw = Path(path).read_bytes()

    # Basic encoding detection
    if raw.startswith(b"\xff\xfe"):
        enc = "utf-16-le"
    elif raw.startswith(b"\xfe\xff"):
        enc = "utf-16-be"
    elif raw.startswith(b"\xef\xbb\xbf"):
        enc = "utf-8-sig"
    else:
        try:
            raw.decode("utf-8")
            enc = "utf-8"
        except UnicodeDecodeError:
            enc = "latin-1"

    # explicit-endian utf-16 keeps the BOM as U+FEFF
    return raw.decode(enc, errors="ignore").lstrip("\ufeff")


def parse_ddl(path) -> Dict[str, TableSchema]:
    return parse_ddl_text(read_ddl(path))
