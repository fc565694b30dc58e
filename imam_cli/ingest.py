import logging
from typing import Callable, Iterator, List, NamedTuple, Optional

import pandas as pd

from imam_cli.cfg import EnvironmentContext
from imam_cli.import_areas import create_or_update_import_area
from imam_cli.import_params import ParamValue
from imam_cli.shell import CommandResult
from imam_cli.template import BRIDGE_PREFIX, DCN_PREFIX, FIRST_DATA_ROW, IA_PREFIX

FILE_CONTENT_IDS = ("DirectoryContents", "S3BucketContents")
# number of '|' in an AssetsToImport entry -> object kind
ASSET_KINDS = {0: "database", 1: "schema", 2: "table"}


class ImportRow(NamedTuple):
    bridge_name: str
    name: str
    description: str
    dcn_params: List[ParamValue]
    bridge_params: List[ParamValue]


def prep_value(pid: str, value) -> str:
    """Expand the shorthand used in the template into IMAM's asset notation."""
    value = "" if value is None else str(value)
    if pid in FILE_CONTENT_IDS:
        parts = [v for v in value.split(";") if v]
        return ";".join(f"folder[{v}]" if v.endswith("/") else f"file[{v}]" for v in parts)
    if pid == "AssetsToImport":
        out = []
        for v in (v for v in value.split(";") if v):
            kind = ASSET_KINDS.get(v.count("|"))
            if kind:
                out.append(f"{kind}[{v}]")
        return ";".join(out)
    return value


def read_import_rows(path) -> Iterator[ImportRow]:
    sheets = pd.read_excel(path, sheet_name=None, header=None, dtype=str)
    for sheet_name, df in sheets.items():
        df = df.fillna("")
        if len(df) < FIRST_DATA_ROW:
            continue
        ids = [str(v).strip() for v in df.iloc[0].tolist()]
        names = [str(v).strip() for v in df.iloc[2].tolist()]

        for _, row in df.iloc[FIRST_DATA_ROW - 1:].iterrows():
            vals = [str(v).strip() for v in row.tolist()]
            if all(v == "" for v in vals):
                continue
            name, desc, dcn, params = "", "", [], []
            for pid, display, value in zip(ids, names, vals):
                if not pid:
                    continue
                if pid == IA_PREFIX + "name":
                    name = value
                elif pid == IA_PREFIX + "desc":
                    desc = value
                elif pid.startswith(DCN_PREFIX):
                    key = pid[len(DCN_PREFIX):]
                    dcn.append(ParamValue(key, display, prep_value(key, value)))
                elif pid.startswith(BRIDGE_PREFIX):
                    key = pid[len(BRIDGE_PREFIX):]
                    params.append(ParamValue(key, display, prep_value(key, value)))
            yield ImportRow(sheet_name, name, desc, dcn, params)


def load_metadata(env: EnvironmentContext, path,
                  callback: Optional[Callable[[CommandResult, ImportRow], None]] = None):
    """Create (or re-import) one import area per filled-in template row."""
    results = []
    for row in read_import_rows(path):
        if row.name:
            result = create_or_update_import_area(
                env, row.name, row.description, row.bridge_name, row.dcn_params, row.bridge_params
            )
        else:
            logging.warning("Row on sheet '%s' has no import area name", row.bridge_name)
            result = CommandResult(1, "Missing import area name (required).")
        results.append((row, result))
        if callback:
            callback(result, row)
    return results


def get_project_params(asset_type: str, dcn_params, bridge_params) -> Optional[dict]:
    """Project scope (host, databases, schemas, tables, filters) for a database import."""
    if asset_type != "database":
        return None

    db_names, schema_names, table_names = [], [], []
    db_filter = next((p.value for p in dcn_params if p.id == "Database"), "")
    hostname, schema_filter, table_filter = "", "", ""
    for p in bridge_params:
        if p.id == "AP_Host system name":
            hostname = p.value
        elif p.id == "SchemaNameFilter":
            schema_filter = p.value
        elif p.id == "TableNameFilter":
            table_filter = p.value
        elif p.id == "AssetsToImport":
            for obj in (p.value or "").split(";"):
                for prefix, target in (("database[", db_names), ("schema[", schema_names), ("table[", table_names)):
                    if obj.startswith(prefix):
                        target.append(obj[len(prefix):-1])

    return {
        "hostname": hostname,
        "dbNames": db_names,
        "schemaNames": schema_names,
        "tableNames": table_names,
        "dbFilter": db_filter,
        "schemaFilter": schema_filter,
        "tableFilter": table_filter,
    }
