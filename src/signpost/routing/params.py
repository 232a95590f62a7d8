"""Route parameter substitution.

Link paths name parameters with a leading colon, e.g. ``/#/summary/:aaid``.
Values come from the routing host's ``route_parameters``.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

TOKEN_PATTERN = re.compile(r":[a-zA-Z_]+")


@dataclass(frozen=True, slots=True)
class Substitution:
    """Result of filling a path's parameter tokens.

    Tokens without a value are left in ``path`` verbatim and listed in
    ``missing``.
    """

    path: str
    missing: tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.missing


def substitute_params(path: str, parameters: Mapping[str, str]) -> Substitution:
    """Replace every ``:name`` token in *path* with ``parameters[name]``."""
    missing: list[str] = []

    def fill(match: re.Match[str]) -> str:
        name = match.group(0)[1:]
        if name in parameters:
            return str(parameters[name])
        missing.append(name)
        return match.group(0)

    return Substitution(path=TOKEN_PATTERN.sub(fill, path), missing=tuple(missing))
