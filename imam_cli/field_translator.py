import re
from dataclasses import dataclass

from imam_cli.errors import MalformedDDLError
from imam_cli.type_mapper import HEADER, OSH, map_type, split_type

NOT_NULL = "NOT NULL"
_TYPE_PARAMS = re.compile(r"\s*(\([^)]*\))")


@dataclass(frozen=True)
class TypedField:
    name: str
    sql_type: str          # as written, e.g. DECIMAL(5,2)
    nullable: bool = True

    @property
    def base_type(self) -> str:
        return split_type(self.sql_type)[0].upper()

    @property
    def type_params(self) -> str:
        return split_type(self.sql_type)[1]

    @property
    def nullability(self) -> str:
        return "nullable" if self.nullable else "not nullable"


def parse_column(fragment: str) -> TypedField:
    """
    'NAME TYPE[(n[,m])] [NOT NULL]' -> TypedField.

    Only the exact trailing marker NOT NULL makes a field non-nullable; any
    other qualifier (DEFAULT 0, NULL, ...) is dropped and the field stays
    nullable.
    """
    frag = fragment.strip()
    name, sep, remainder = frag.partition(" ")
    if not sep or not remainder.strip():
        raise MalformedDDLError("Column definition without a type", fragment)

    # DECIMAL (10, 2) -> DECIMAL(10,2)
    remainder = _TYPE_PARAMS.sub(lambda m: re.sub(r"\s+", "", m.group(1)), remainder.strip())
    sql_type, _, extras = remainder.partition(" ")
    return TypedField(name=name, sql_type=sql_type, nullable=extras.strip() != NOT_NULL)


def to_header_field(field: TypedField) -> str:
    return f"{field.name}:{map_type(field.sql_type, HEADER)} {field.nullability}"


def to_osh_field(field: TypedField) -> str:
    return f"{field.name}: {field.nullability} {map_type(field.sql_type, OSH)};"


def translate(fragment: str, dialect: str = HEADER) -> str:
    field = parse_column(fragment)
    if dialect == HEADER:
        return to_header_field(field)
    if dialect == OSH:
        return to_osh_field(field)
    raise ValueError(f"Unknown schema dialect: {dialect}")
