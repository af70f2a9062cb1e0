class DateTimeTransformerError(Exception):
    pass


class UnexpectedTypeError(DateTimeTransformerError, TypeError):
    def __init__(self, value: object, expected_type: str) -> None:
        self.value = value
        self.expected_type = expected_type
        given = "null" if value is None else type(value).__name__
        super().__init__(f"Expected argument of type {expected_type}, {given} given")


class TransformationFailedError(DateTimeTransformerError, ValueError):
    def __init__(
        self, message: str, *, value: object = None, pattern: str | None = None
    ) -> None:
        self.value = value
        self.pattern = pattern
        super().__init__(message)


class InvalidTimezoneError(DateTimeTransformerError, ValueError):
    def __init__(self, timezone: str) -> None:
        self.timezone = timezone
        super().__init__(f"Unknown time zone: {timezone!r}")
