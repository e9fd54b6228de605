"""Errors raised while loading and flattening RAML documents."""


class RamlDocError(Exception):
    """Base class for all ramldoc errors."""


class RamlParseError(RamlDocError):
    """The input file could not be turned into a RAML document tree."""


class UnsupportedParameterType(RamlDocError):
    """A parameter has no example and a type we cannot invent one for."""

    def __init__(self, param_type: str, display_name: str | None = None):
        self.param_type = param_type
        self.display_name = display_name
        message = f"Cannot make an example for parameter type {param_type!r}"
        if display_name:
            message += f" (parameter {display_name!r})"
        super().__init__(message)
