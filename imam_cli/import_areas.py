import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from imam_cli.cfg import PATHS, EnvironmentContext
from imam_cli.errors import ImportAreaError
from imam_cli.import_params import ParamValue, build_parameter_xml
from imam_cli.shell import CommandResult, call_cli

TIMESTAMPS = ("importTS", "analysisTS", "previewTS", "shareTS")


def _ts(value: str):
    ts = pd.to_datetime(value.strip(), errors="coerce")
    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        # naive local time, same basis as Timestamp.now()
        ts = ts.tz_convert(datetime.now().astimezone().tzinfo).tz_localize(None)
    return ts


# ----------------------------------------------------
# imam.sh -a list -t area
# ----------------------------------------------------
def parse_area_list(output: str) -> Dict[str, dict]:
    """
    Parse the table printed by 'imam.sh -a list -t area'.

    The table starts after a '====' rule; each area is a block of
    '|'-separated lines (long names and timestamps wrap onto several lines)
    closed by a '_______' rule.
    """
    areas = {}
    in_table = False
    name, import_ts, analysis_ts, preview_ts, share_ts = "", "", "", "", ""
    for line in output.split("\n"):
        if line.startswith("="):
            in_table = True
            continue
        if line.startswith("_______"):
            areas[name] = dict(zip(TIMESTAMPS, map(_ts, (import_ts, analysis_ts, preview_ts, share_ts))))
            in_table = True
            name, import_ts, analysis_ts, preview_ts, share_ts = "", "", "", "", ""
            continue
        if in_table:
            tokens = line.split("|")
            if len(tokens) > 4:
                name += tokens[0].strip()
                import_ts += " " + tokens[1].strip()
                analysis_ts = " " + tokens[2].strip()
                preview_ts = " " + tokens[3].strip()
                share_ts = " " + tokens[4].strip()
    return areas


def get_import_area_list(env: EnvironmentContext) -> Dict[str, dict]:
    result = call_cli(env, "-a", "list", "-t", "area")
    if result.code != 0:
        raise ImportAreaError(f"Unable to list import areas: {result.stdout.strip()}")
    return parse_area_list(result.stdout)


# ----------------------------------------------------
# Create / re-import
# ----------------------------------------------------
def create_or_update_import_area(env: EnvironmentContext, name: str, description: str = "",
                                 bridge_name: Optional[str] = None,
                                 dcn_params: Iterable[ParamValue] = (),
                                 bridge_params: Iterable[ParamValue] = ()) -> CommandResult:
    if name in get_import_area_list(env):
        logging.info("Re-importing existing area '%s'", name)
        print(f"Re-importing existing area '{name}'.")
        return call_cli(env, "-a", "reimport", "-i", name)

    if not bridge_name:
        raise ImportAreaError(f"Import area '{name}' does not exist and no bridge was given to create it.")

    param_file = Path(PATHS.get("tmp", "/tmp")) / (name.replace(" ", "_") + ".xml")
    build_parameter_xml(env, param_file, bridge_name, dcn_params, bridge_params)
    logging.info("Creating new import area '%s' with %s", name, param_file)
    print(f"Creating new import area '{name}' with: {param_file}")
    result = call_cli(
        env, "-a", "import", "-i", name,
        "-ad", description or "",
        "-id", f"Initial import on {datetime.now():%Y-%m-%d %H:%M:%S}",
        "-pf", str(param_file),
    )
    if result.code == 0:
        param_file.unlink()
    return result


# ----------------------------------------------------
# Refresh stale areas
# ----------------------------------------------------
def needs_refresh(last_shared, refresh_before) -> bool:
    return last_shared is None or last_shared < refresh_before


def refresh_import_areas(env: EnvironmentContext, name: Optional[str] = None,
                         hours: Optional[float] = None,
                         continue_on_error: bool = True) -> List[Tuple[str, CommandResult]]:
    """
    Re-import one area (name) or every area whose last share is older than
    `hours`. Without `hours` everything shared before now is refreshed.
    """
    areas = get_import_area_list(env)
    refresh_before = pd.Timestamp.now()
    if hours is not None:
        refresh_before -= pd.Timedelta(hours=hours)

    if name:
        if name not in areas:
            raise ImportAreaError(f"No import area exists with the name '{name}'.")
        candidates = {name: areas[name]}
    else:
        candidates = areas

    refreshed = []
    for area, stamps in candidates.items():
        if not needs_refresh(stamps.get("shareTS"), refresh_before):
            print(f"Import area '{area}' already refreshed within the timescale specified.")
            continue
        result = create_or_update_import_area(env, area)
        refreshed.append((area, result))
        if result.code == 0:
            logging.info("Refreshed import area '%s'", area)
        else:
            logging.error("Refresh of import area '%s' failed: %s", area, result.stdout.strip())
            if not continue_on_error:
                raise ImportAreaError(f"Refresh of import area '{area}' failed: {result.stdout.strip()}")
    return refreshed
