"""Shared fixtures: seed descriptors, a locator, and an entitlement-driven host."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from signpost.locator.descriptor import LocationDescriptor
from signpost.locator.locations import Location, ui_node
from signpost.locator.matrix import LocatorMatrix
from signpost.routing.definition import RouteCondition

ACTING_URL = "https://console.overview.example.com/#/remediations-scan-status/2"


@dataclass
class EntitlementHost:
    """Routing host backed by a fixed entitlement table. Records dispatches."""

    locator: LocatorMatrix
    current_url: str = ""
    route_parameters: Mapping[str, str] = field(default_factory=dict)
    entitlements: dict[str, bool] = field(default_factory=dict)
    dispatched: list[Any] = field(default_factory=list)

    def dispatch(self, route: Any) -> None:
        self.dispatched.append(route)

    def evaluate(self, condition: RouteCondition) -> bool:
        if condition.entitlements:
            return self.entitlements.get(condition.entitlements, False)
        return False


@pytest.fixture
def nodes() -> list[LocationDescriptor]:
    return [
        *ui_node(Location.OVERVIEW_UI, "overview", 4213),
        *ui_node(Location.INCIDENTS_UI, "incidents", 8001),
    ]


@pytest.fixture
def locator(nodes: list[LocationDescriptor]) -> LocatorMatrix:
    return LocatorMatrix(nodes, ACTING_URL)


@pytest.fixture
def host(locator: LocatorMatrix) -> EntitlementHost:
    return EntitlementHost(
        locator=locator,
        current_url=ACTING_URL,
        entitlements={"a": True, "b": False, "c": True, "d": False},
    )
