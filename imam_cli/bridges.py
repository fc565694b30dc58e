"""
Metadata bridges known to IMAM and the parameters each one takes.

Only the bridges in IMPLEMENTED_BRIDGES have connector / bridge parameter
definitions; the rest are listed so their asset type can be looked up.
"""
from types import MappingProxyType
from typing import NamedTuple, Optional

from imam_cli.errors import UnknownBridgeError


class Param(NamedTuple):
    display_name: str
    required: bool = False
    type: Optional[str] = None
    default: Optional[str] = None


IMPLEMENTED_BRIDGES = (
    "Amazon S3",
    "IBM InfoSphere DB2 Connector",
    "File Connector - Engine Tier",
    "File Connector - HDFS",
)

# name -> (asset type, bridge id, bridge version)
_BRIDGES = MappingProxyType({
    "Amazon S3":                              ("file", "CAS/AmazonS3", "1.0_1.0"),
    "File Connector - Engine Tier":           ("file", "CAS/LocalFileConnector", "1.6_1.0"),
    "File Connector - HDFS":                  ("file", "CAS/HDFSFileConnector", "1.6_1.0"),
    "HDFS":                                   ("file", "", ""),
    "Hive Connector":                         ("database", "", ""),
    "IBM Cognos TM1":                         ("database", "", ""),
    "IBM Cognos TM1 Connector":               ("database", "", ""),
    "IBM InfoSphere DB2 Connector":           ("database", "CAS/DB2Connector", "9.1_1.0"),
    "IBM InfoSphere Master Data Management":  ("database", "", ""),
    "IBM InfoSphere Streams":                 ("file", "", ""),
    "IBM Netezza Connector":                  ("database", "", ""),
    "JDBC Connector":                         ("database", "", ""),
    "ODBC Connector":                         ("database", "", ""),
    "XSD":                                    ("file", "", ""),
    "Oracle Connector 11g":                   ("database", "", ""),
    "Oracle Connector 12c":                   ("database", "", ""),
    "Greenplum connector":                    ("database", "", ""),
    "Teradata Connector":                     ("database", "", ""),
})

BOOLEAN = "BOOLEAN"
REPLACE_EXISTING = "Replace_existing_description"
KEEP_EXISTING = "Keep_existing_description"

_CONNECTOR_PARAMS = MappingProxyType({
    "Amazon S3": MappingProxyType({
        "dcName_":            Param("Name", required=True),
        "dcDescription_":     Param("Descripion", required=True),
        "Region":             Param("Region"),
        "UseCredentialsFile": Param("Use credentials file", type=BOOLEAN, default="true"),
        "CredentialsFile":    Param("Credentials file", required=True),
        "Username":           Param("Access key", required=True),
        "Password":           Param("Secret key", required=True),
    }),
    "IBM InfoSphere DB2 Connector": MappingProxyType({
        "dcName_":            Param("Name", required=True),
        "dcDescription_":     Param("Description"),
        "Database":           Param("Database", required=True),
        "Username":           Param("User name"),
        "Password":           Param("Password"),
        "Instance":           Param("Instance"),
    }),
    "File Connector - Engine Tier": MappingProxyType({
        "dcName_":            Param("Name", required=True),
        "dcDescription_":     Param("Description"),
    }),
    "File Connector - HDFS": MappingProxyType({
        "dcName_":            Param("Name", required=True),
        "dcDescription_":     Param("Description"),
        "FileSystem":         Param("File system", required=True, default="1"),  # 1 = WebHDFS
        "ssl":                Param("Use SSL (HTTPS)", type=BOOLEAN, default="false"),
        "Kerberos":           Param("Use Kerberos", type=BOOLEAN, default="false"),
        "UseKeytab":          Param("Use keytab", type=BOOLEAN, default="false"),
        "Keytab":             Param("Keytab"),
        "UseCustomURL":       Param("Use custom URL", type=BOOLEAN, default="false"),
        "CustomURL":          Param("Custom URL"),
        "Host":               Param("Host", required=True),
        "Port":               Param("Port"),
        "Username":           Param("User name", required=True),
        "Password":           Param("Password", required=True),
    }),
})

_BRIDGE_PARAMS = MappingProxyType({
    "Amazon S3": MappingProxyType({
        "S3Bucket":                   Param("Amazon S3 bucket", required=True),
        "S3BucketContents":           Param("S3 bucket contents"),
        "ImportFileStructure":        Param("Import file structure", type=BOOLEAN, default="True"),
        "IgnoreMetadataAccessErrors": Param("Ignore metadata access errors", type=BOOLEAN, default="False"),
        "Asset_description_already_exists": Param("If an asset description already exists", default=REPLACE_EXISTING),
        "AP_Host system name":        Param("Host system name", required=True),
    }),
    "IBM InfoSphere DB2 Connector": MappingProxyType({
        "includeTables":              Param("Include tables", type=BOOLEAN, default="True"),
        "includeViews":               Param("Include views", type=BOOLEAN, default="True"),
        "includeNicknames":           Param("Include nicknames", type=BOOLEAN, default="True"),
        "includeAliases":             Param("Include aliases", type=BOOLEAN, default="True"),
        "importXmlAsLob":             Param("XML columns as LOBs", type=BOOLEAN, default="True"),
        "IncludeSystemObjects":       Param("Include system objects", type=BOOLEAN, default="False"),
        "ImportAssetsAsDatabases":    Param("Import assets as\ndatabases from z/OS", type=BOOLEAN, default="False"),
        "SchemaNameFilter":           Param("Schema name filter"),
        "UseRegexInSchemaNameFilter": Param("Use regular expression in schema\nname filter", type=BOOLEAN, default="False"),
        "TableNameFilter":            Param("Table name filter"),
        "AssetsToImport":             Param("Assets to import"),
        "Asset_description_already_exists": Param("If an asset description already exists", default=REPLACE_EXISTING),
        "IgnoreTableAccessErrors":    Param("Ignore table access\nerrors", type=BOOLEAN, default="False"),
        "AP_Host system name":        Param("Host system name", required=True),
        "AP_Database name":           Param("Database name"),
    }),
    "File Connector - Engine Tier": MappingProxyType({
        "DirectoryContents":          Param("Assets to import"),
        "ImportFileStructure":        Param("Import file structure", type=BOOLEAN, default="True"),
        "IgnoreAccessError":          Param("Ignore metadata access errors", type=BOOLEAN, default="False"),
        "Asset_description_already_exists": Param("If an asset description already exists", default=REPLACE_EXISTING),
        "Identity_HostSystem":        Param("Host system name", required=True),
    }),
    "File Connector - HDFS": MappingProxyType({
        "DirectoryContents":          Param("Assets to import"),
        "ImportFileStructure":        Param("Import file structure", type=BOOLEAN, default="False"),
        "IgnoreAccessError":          Param("Ignore metadata access errors", type=BOOLEAN, default="false"),
        "Asset_description_already_exists": Param("If an asset description already exists", default=REPLACE_EXISTING),
        "Identity_HostSystem":        Param("Host system name", required=True),
    }),
})


def _get(table, bridge_name):
    if bridge_name not in table:
        raise UnknownBridgeError(bridge_name)
    return table[bridge_name]


def asset_type(bridge_name: str) -> str:
    return _get(_BRIDGES, bridge_name)[0]


def bridge_version(bridge_name: str) -> str:
    return _get(_BRIDGES, bridge_name)[2]


def bridge_id(bridge_name: str, version: str) -> str:
    """'CAS/DB2Connector' + '__' + major part of '9.1_1.0'"""
    return _get(_BRIDGES, bridge_name)[1] + "__" + version.split("_", 1)[0]


def connector_params(bridge_name: str):
    return _get(_CONNECTOR_PARAMS, bridge_name)


def bridge_params(bridge_name: str):
    return _get(_BRIDGE_PARAMS, bridge_name)
