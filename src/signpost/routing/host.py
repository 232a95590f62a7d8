"""The routing host contract.

A routing host is whatever embeds the menu: it knows the current URL and
route parameters, owns the location registry, executes route actions and
answers entitlement questions. No base class required; the tree checks the
shape, not the lineage.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from signpost.locator.matrix import LocatorMatrix

if TYPE_CHECKING:
    from signpost.routing.definition import RouteCondition


@runtime_checkable
class RoutingHost(Protocol):
    """Protocol for anything a ``RouteNode`` tree can be bound to.

    ``current_url`` and ``route_parameters`` are read on every refresh, so
    the host keeps them fresh and calls ``refresh()`` after changing them.
    """

    current_url: str
    locator: LocatorMatrix
    route_parameters: Mapping[str, str]

    def dispatch(self, route: Any) -> None:
        """Execute a route's action. Never called by the tree itself."""
        ...

    def evaluate(self, condition: RouteCondition) -> bool:
        """Return the truth of a leaf condition against host-owned state."""
        ...


@dataclass(slots=True)
class NullRoutingHost:
    """Empty routing host for tests, debugging and placeholder menus.

    Every leaf condition is false and dispatching does nothing. Each
    instance owns a private, empty ``LocatorMatrix``.
    """

    current_url: str = ""
    locator: LocatorMatrix = field(default_factory=LocatorMatrix)
    route_parameters: Mapping[str, str] = field(default_factory=dict)

    def dispatch(self, route: Any) -> None:
        return None

    def evaluate(self, condition: RouteCondition) -> bool:
        return False
