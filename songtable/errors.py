from collections.abc import Sequence


class MalformedRowError(ValueError):
    def __init__(self, columns: Sequence[str], reason: str) -> None:
        super().__init__(f"Malformed row {list(columns)}: {reason}")
        self.columns = list(columns)
        self.reason = reason


class InvalidEnvironmentVariableError(Exception):
    def __init__(self, variable_name: str, value: str) -> None:
        super().__init__(
            f"Invalid value for {variable_name} environment variable: {value}"
        )
