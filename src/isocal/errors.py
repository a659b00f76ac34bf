class CalendarError(Exception):
    pass


class CalendarOverflowError(CalendarError, OverflowError):
    def __init__(self, operation, operand):
        self.operation = operation
        self.operand = operand
        super().__init__(
            f"{operation} overflowed the representable date range ({operand})"
        )


class InvalidMonthError(CalendarError, ValueError):
    def __init__(self, month):
        self.month = month
        super().__init__(f"invalid month {month!r}, expected a value in 1..12")


class EnvParseError(CalendarError, ValueError):
    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(
            f"could not parse environment variable {name}={value!r}: "
            "expected a non-negative integer"
        )
