from typing_extensions import override

from ...ports import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_conversion(self, direction: str, value: object, result: object) -> None:
        return

    @override
    def log_column_processed(
        self, column: str, row_count: int, failed_count: int
    ) -> None:
        return

    @override
    def log_final_stats(self) -> None:
        return
