import os
from pathlib import Path
from typing import Iterable, NamedTuple, Optional

from lxml import etree

from imam_cli import bridges
from imam_cli.cfg import EnvironmentContext
from imam_cli.shell import encrypt

RELEASE = "11.5.0.1"


class ParamValue(NamedTuple):
    id: str
    display_name: str
    value: str = ""


class ImportParameters:
    """The <ImportParameters> document imam.sh reads with -pf."""

    def __init__(self, env: EnvironmentContext, bridge_name: str, bridge_version: str):
        self.env = env
        self.root = etree.Element("ImportParameters")
        self.root.set("bridgeId", bridges.bridge_id(bridge_name, bridge_version))
        self.root.set("bridgeVersion", bridge_version)
        self.root.set("release", RELEASE)
        self.root.set("bridgeDisplayName", bridge_name)

    def add_parameter(self, id: str, display_name: str, value: Optional[str] = None, location=None):
        parent = self.root if location is None else location
        param = etree.SubElement(parent, "Parameter", displayName=display_name, id=id)
        text = "" if value is None else str(value)
        if "PASSWORD" in id.upper():
            text = encrypt(self.env, text)
        etree.SubElement(param, "value").text = text
        return param

    def add_data_connection(self, params: Iterable[ParamValue]):
        composite = etree.SubElement(
            self.root, "CompositeParameter",
            isRequired="true", displayName="Data connection",
            id="DataConnection", type="DATA_CONNECTION",
        )
        for p in params:
            self.add_parameter(p.id, p.display_name, p.value, composite)
        return composite

    def to_xml(self) -> str:
        return etree.tostring(self.root, pretty_print=True, encoding="unicode")


def build_parameter_xml(env: EnvironmentContext, filename, bridge_name: str,
                        dcn_params: Iterable[ParamValue], params: Iterable[ParamValue]) -> Path:
    ip = ImportParameters(env, bridge_name, bridges.bridge_version(bridge_name))
    ip.add_data_connection(dcn_params)
    for p in params:
        ip.add_parameter(p.id, p.display_name, p.value)

    # may carry encrypted credentials
    path = Path(filename)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(ip.to_xml())
    return path
