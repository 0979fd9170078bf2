class SolarSeriesError(Exception): ...


class EmptyInputError(SolarSeriesError): ...


class MalformedDateError(SolarSeriesError, ValueError): ...


class NumericParseError(SolarSeriesError, ValueError): ...


def require(
    condition: bool, message: str, exc: type[SolarSeriesError] = SolarSeriesError
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
