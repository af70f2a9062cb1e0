from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_conversion(self, direction: str, value: object, result: object) -> None: ...

    def log_column_processed(
        self, column: str, row_count: int, failed_count: int
    ) -> None: ...

    def log_final_stats(self) -> None: ...
