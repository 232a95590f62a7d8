"""Runtime route tree.

A ``RouteNode`` mirrors one ``RouteDefinition`` and carries the state a
menu needs at any moment: whether the item is visible, where it links to,
and whether it is activated by the current URL.

Building the root of a tree resolves everything once::

    menu = RouteNode(host, RouteDefinition.from_dict(menu_json))
    for item in menu.children:
        if item.visible:
            ...

After the host's URL, route parameters or entitlements change, call
``menu.refresh()`` (or ``menu.refresh(True)`` to re-resolve every href).
"""

from __future__ import annotations

import logging
import re
import weakref
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from signpost.routing.definition import RouteCondition, RouteDefinition
from signpost.routing.host import NullRoutingHost, RoutingHost
from signpost.routing.params import substitute_params

logger = logging.getLogger("signpost.routing")


# ---------------------------------------------------------------------------
# UNSET sentinel
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class _Unset:
    """Marker for "no value" in ``set_property()``; distinct from ``None``."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def activation_pattern(base_href: str, pattern: str) -> str:
    """Anchor a ``matches`` entry to a route's base href.

    Only the first slash is escaped; the rest of *base_href* is used verbatim
    as regex source.
    """
    return ("^" + base_href + pattern + "$").replace("/", "\\/", 1)


# ---------------------------------------------------------------------------
# RouteNode
# ---------------------------------------------------------------------------


class RouteNode:
    """A node in the runtime route tree.

    Children are owned, in definition order. The parent link is a weak
    reference, so a subtree never keeps its ancestors alive.
    """

    __slots__ = (
        "__weakref__",
        "_parent",
        "activated",
        "base_href",
        "caption",
        "children",
        "definition",
        "host",
        "href",
        "properties",
        "visible",
    )

    def __init__(
        self,
        host: RoutingHost,
        definition: RouteDefinition,
        parent: RouteNode | None = None,
    ) -> None:
        self.host = host
        self.definition = definition
        self.caption = definition.caption
        self.visible = True
        self.activated = False
        self.base_href: str | None = None
        self.href: str | None = None
        self._parent = weakref.ref(parent) if parent is not None else None
        # Definition properties seed the overlay but remain the immutable defaults
        self.properties: dict[str, Any] = dict(definition.properties)
        self.children: list[RouteNode] = [
            RouteNode(host, child, self) for child in definition.children
        ]
        if parent is None:
            self.refresh(True)

    @classmethod
    def empty(cls) -> RouteNode:
        """Return an empty route attached to a null routing host."""
        return cls(NullRoutingHost(), RouteDefinition(caption="Nothing"))

    @classmethod
    def from_dict(cls, host: RoutingHost, data: Mapping[str, Any]) -> RouteNode:
        """Build and resolve a tree from a JSON-shaped definition mapping."""
        return cls(host, RouteDefinition.from_dict(data))

    @property
    def parent(self) -> RouteNode | None:
        return self._parent() if self._parent is not None else None

    # -- Properties --

    def set_property(self, name: str, value: Any) -> None:
        """Set an arbitrary property. ``UNSET`` behaves like ``delete_property``."""
        if value is UNSET:
            self.delete_property(name)
        else:
            self.properties[name] = value

    def delete_property(self, name: str) -> None:
        """Delete a property, restoring the definition's value if it has one."""
        if name in self.definition.properties:
            self.properties[name] = self.definition.properties[name]
        else:
            self.properties.pop(name, None)

    def get_property(self, name: str, default: Any = None) -> Any:
        return self.properties.get(name, default)

    # -- State --

    def refresh(self, resolve: bool = False) -> bool:
        """Recompute visibility, href and activation for this subtree.

        With *resolve*, hrefs are recalculated even when already set.
        Returns True if this route or one of its descendants is activated.
        """
        definition = self.definition
        self.visible = (
            self.evaluate_condition(definition.visible) if definition.visible is not None else True
        )

        child_activated = False
        for child in self.children:
            if child.refresh(resolve):
                child_activated = True

        action = definition.action
        if (
            self.visible
            and (resolve or self.href is None)
            and action is not None
            and action.type == "link"
            and not self.evaluate_href()
        ):
            self.visible = False
            self.activated = False
            return False

        self.activated = child_activated or self.evaluate_activation()

        parent = self.parent
        if definition.bubble and parent is not None:
            parent.activated = parent.activated or self.activated
            parent.href = self.href

        return self.activated

    def evaluate_href(self) -> bool:
        """Resolve ``base_href`` and ``href`` from the link action.

        Returns False when the location is unknown (both cleared) or when a
        path parameter has no value (the href keeps the literal token).
        """
        action = self.definition.action
        if action is None:
            return False
        node = self.host.locator.get_node(action.location) if action.location else None
        if node is None:
            logger.warning("Cannot link to unknown location %r", action.location)
            self.base_href = None
            self.href = None
            return False

        self.base_href = node.uri
        result = substitute_params(action.path or "", self.host.route_parameters)
        self.href = self.base_href + result.path
        if not result.complete:
            logger.debug(
                "Route %r is missing parameters %s", self.caption, ", ".join(result.missing)
            )
        return result.complete

    def evaluate_activation(self) -> bool:
        """True if the current URL matches this route's href or match patterns."""
        if not self.href or self.base_href is None:
            return False
        current_url = self.host.current_url
        if not current_url.startswith(self.base_href):
            return False

        href = self.href.split("?", 1)[0]
        if href.startswith(current_url) and current_url.startswith(href):
            return True

        for pattern in self.definition.matches:
            if re.match(activation_pattern(self.base_href, pattern), current_url):
                return True
        return False

    def evaluate_condition(self, condition: RouteCondition) -> bool:
        """Evaluate a visibility condition.

        Groups count passing children: ``"any"`` needs one, ``"all"`` needs
        every one, and any other rule (``"none"`` included) needs zero.
        Leaves are evaluated by the routing host.
        """
        if not condition.is_group:
            return bool(self.host.evaluate(condition))

        children = condition.conditions or ()
        total = len(children)
        passed = sum(1 for child in children if self.evaluate_condition(child))
        if condition.rule == "any":
            return passed > 0
        if condition.rule == "all":
            return passed == total
        return passed == 0

    # -- Actions and traversal --

    def dispatch(self) -> None:
        """Ask the routing host to execute this route's action."""
        self.host.dispatch(self)

    def walk(self) -> Iterator[RouteNode]:
        """Yield this route and every descendant, depth-first, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_by_id(self, route_id: str) -> RouteNode | None:
        """Return the first route in this subtree whose definition has *route_id*."""
        for route in self.walk():
            if route.definition.id == route_id:
                return route
        return None

    def summarize(self, show_all: bool = True, depth: int = 0) -> str:
        """Return an indented outline of the subtree and its state.

        Hidden routes and their descendants are omitted unless *show_all*.
        """
        if not show_all and not self.visible:
            return ""
        state = "visible" if self.visible else "hidden"
        activation = "activated" if self.activated else "inactive"
        lines = [f"{'    ' * depth}{self.caption} ({state}, {activation})"]
        for child in self.children:
            outline = child.summarize(show_all, depth + 1)
            if outline:
                lines.append(outline)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"<RouteNode {self.caption!r} visible={self.visible} activated={self.activated}>"
