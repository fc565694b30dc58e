class ImamError(Exception):
    """Base class for every error raised by imam_cli."""


class UnsupportedTypeError(ImamError, ValueError):
    def __init__(self, sql_type: str):
        self.sql_type = sql_type
        super().__init__(f"Unsupported SQL data type: {sql_type}")


class UnknownTableError(ImamError, LookupError):
    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Unable to find table name: {table}")


class MalformedDDLError(ImamError, ValueError):
    def __init__(self, reason: str, statement: str):
        self.statement = statement
        super().__init__(f"{reason}: {statement[:80]}")


class UnknownBridgeError(ImamError, LookupError):
    def __init__(self, bridge_name: str):
        self.bridge_name = bridge_name
        super().__init__(f"Unable to find a bridge named '{bridge_name}'.")


class ImportAreaError(ImamError):
    pass
