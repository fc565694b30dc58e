"""
Excel template listing the import parameters of each bridge.

Layout of every sheet (sheet name = bridge name):
  row 1  hidden parameter ids: IA_name, IA_desc, DCN_<id>, P_<id>
  row 2  merged group headings
  row 3  display names (bold italic = required)
  row 4  example / default values; one import area per row from here on
"""
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.datavalidation import DataValidation

from imam_cli import bridges

IA_PREFIX, DCN_PREFIX, BRIDGE_PREFIX = "IA_", "DCN_", "P_"
IMPORT_AREA_FIELDS = {"name": "Name", "desc": "Description"}
FIRST_DATA_ROW = 4


def _style(fg, bg, bold=False, italic=False, size=None):
    return (Font(bold=bold, italic=italic, color=fg, size=size),
            PatternFill(fill_type="solid", fgColor=bg))


HIDDEN = _style("FFFAFAFA", "FF000000", size=8)

# group -> (heading, required, optional)
STYLES = {
    "ia": (_style("FFFFFFFF", "FF325C80", bold=True),
           _style("FFFFFFFF", "FF4178BE", bold=True, italic=True),
           _style("FF325C80", "FF7CC7FF", italic=True)),
    "dcn": (_style("FFFFFFFF", "FF2D660A", bold=True),
            _style("FFFFFFFF", "FF4B8400", bold=True, italic=True),
            _style("FF2D660A", "FFB4E051", italic=True)),
    "bridge": (_style("FFFFFFFF", "FF006D5D", bold=True),
               _style("FFFFFFFF", "FF008571", bold=True, italic=True),
               _style("FF006D5D", "FF6EEDD8", italic=True)),
}


def _apply(cell, style):
    cell.font, cell.fill = style


def _write_group(ws, col, heading, group, entries):
    """entries: [(id, Param)]; returns the next free column."""
    heading_style, required_style, optional_style = STYLES[group]
    start = col
    for pid, param in entries:
        id_cell = ws.cell(row=1, column=col, value=pid)
        _apply(id_cell, HIDDEN)
        name_cell = ws.cell(row=3, column=col, value=param.display_name)
        _apply(name_cell, required_style if param.required else optional_style)
        ws.column_dimensions[get_column_letter(col)].width = max(16, len(param.display_name))
        if pid == BRIDGE_PREFIX + "Asset_description_already_exists":
            dv = DataValidation(type="list", allow_blank=True,
                                formula1=f'"{bridges.REPLACE_EXISTING},{bridges.KEEP_EXISTING}"')
            ws.add_data_validation(dv)
            dv.add(ws.cell(row=FIRST_DATA_ROW, column=col))
            ws.cell(row=FIRST_DATA_ROW, column=col, value=bridges.REPLACE_EXISTING)
        elif param.default is not None:
            ws.cell(row=FIRST_DATA_ROW, column=col, value=param.default)
        col += 1

    head = ws.cell(row=2, column=start, value=heading)
    _apply(head, heading_style)
    if col - 1 > start:
        ws.merge_cells(start_row=2, start_column=start, end_row=2, end_column=col - 1)
    return col


def get_template_for_bridge(bridge_name: str, wb: Workbook = None) -> Workbook:
    if wb is None:
        wb = Workbook()
        wb.remove(wb.active)
    ws = wb.create_sheet(bridge_name)

    ia = [(IA_PREFIX + k, bridges.Param(v, required=True)) for k, v in IMPORT_AREA_FIELDS.items()]
    dcn = [(DCN_PREFIX + k, p) for k, p in bridges.connector_params(bridge_name).items()]
    bp = [(BRIDGE_PREFIX + k, p) for k, p in bridges.bridge_params(bridge_name).items()]

    col = _write_group(ws, 1, "Import Area", "ia", ia)
    col = _write_group(ws, col, "Data Connection", "dcn", dcn)
    _write_group(ws, col, "Bridge-specific parameters", "bridge", bp)

    ws.row_dimensions[1].hidden = True
    ws.freeze_panes = f"A{FIRST_DATA_ROW}"
    return wb


def build_bridge_template(path, bridge_names=bridges.IMPLEMENTED_BRIDGES):
    wb = None
    for name in bridge_names:
        wb = get_template_for_bridge(name, wb)
    wb.save(path)
    print(f"✅ Created template in: {path}")
    return path
