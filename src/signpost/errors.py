"""Signpost exception hierarchy.

Shared across the locator and routing packages so every module raises
and catches the same types.

Lookups that find nothing (unknown locations, unresolved route parameters,
URLs no descriptor claims) are not errors: they return ``None`` or degrade
the affected route. Only malformed input data raises.
"""


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when locator configuration or seed data is invalid.

    Typically raised while loading location descriptors from external
    configuration, before any lookup happens.
    """


class DefinitionError(SignpostError):
    """Raised when a route definition mapping is malformed.

    The message names the offending node by its position in the tree,
    e.g. ``children[1].children[0].action``.
    """

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}" if path else detail)
