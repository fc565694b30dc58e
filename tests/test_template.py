import pytest
from openpyxl import load_workbook

from imam_cli import bridges
from imam_cli.errors import UnknownBridgeError
from imam_cli.template import build_bridge_template, get_template_for_bridge


def test_bridge_lookups():
    assert bridges.asset_type("IBM InfoSphere DB2 Connector") == "database"
    assert bridges.asset_type("Amazon S3") == "file"
    assert bridges.bridge_version("Amazon S3") == "1.0_1.0"
    assert bridges.bridge_id("IBM InfoSphere DB2 Connector", "9.1_1.0") == "CAS/DB2Connector__9.1"


def test_unknown_bridge():
    with pytest.raises(UnknownBridgeError):
        bridges.connector_params("Nope")
    with pytest.raises(UnknownBridgeError):
        bridges.asset_type("Nope")


def test_every_implemented_bridge_has_params():
    for name in bridges.IMPLEMENTED_BRIDGES:
        assert "dcName_" in bridges.connector_params(name)
        assert "Asset_description_already_exists" in bridges.bridge_params(name)


def test_template_layout():
    ws = get_template_for_bridge("File Connector - Engine Tier")["File Connector - Engine Tier"]
    ids = [c.value for c in ws[1] if c.value]
    assert ids == [
        "IA_name", "IA_desc", "DCN_dcName_", "DCN_dcDescription_",
        "P_DirectoryContents", "P_ImportFileStructure", "P_IgnoreAccessError",
        "P_Asset_description_already_exists", "P_Identity_HostSystem",
    ]
    assert ws.cell(row=2, column=1).value == "Import Area"
    assert ws.cell(row=2, column=3).value == "Data Connection"
    assert ws.cell(row=2, column=5).value == "Bridge-specific parameters"
    assert ws.cell(row=3, column=5).value == "Assets to import"
    assert ws.cell(row=4, column=6).value == "True"
    assert ws.cell(row=4, column=8).value == bridges.REPLACE_EXISTING
    assert ws.row_dimensions[1].hidden
    assert ws.freeze_panes == "A4"
    assert ws.cell(row=3, column=1).font.bold


def test_build_bridge_template(tmp_path):
    out = tmp_path / "BridgeTemplate.xlsx"
    build_bridge_template(out)
    wb = load_workbook(out)
    assert wb.sheetnames == list(bridges.IMPLEMENTED_BRIDGES)
    ws = wb["Amazon S3"]
    assert ws["A1"].value == "IA_name"
    assert ws.data_validations.dataValidation
