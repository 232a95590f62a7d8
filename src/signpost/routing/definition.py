"""Immutable route definitions.

Menu structures usually arrive as JSON. ``RouteDefinition.from_dict()``
turns that shape into frozen dataclasses once, so the runtime tree never
has to second-guess its input::

    {
        "caption": "Incidents",
        "action": {"type": "link", "location": "cd17:incidents", "path": "/#/summary/:aaid"},
        "visible": {"rule": "all", "conditions": [{"entitlements": "incidents"}]},
        "matches": ["/#/summary/.*"],
        "children": [...],
        "bubble": false,
        "properties": {"icon": "warning"}
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from signpost.errors import DefinitionError


@dataclass(frozen=True, slots=True)
class RouteCondition:
    """A visibility condition.

    Either a group (``rule`` plus ``conditions``) combining child
    conditions with ``"any"``, ``"all"`` or ``"none"``, or a leaf that the
    routing host evaluates, typically by looking up ``entitlements``.
    """

    rule: str | None = None
    conditions: tuple[RouteCondition, ...] | None = None
    entitlements: str | None = None
    parameters: tuple[str, ...] = ()

    @property
    def is_group(self) -> bool:
        return bool(self.rule) and self.conditions is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "visible") -> RouteCondition:
        if not isinstance(data, Mapping):
            raise DefinitionError(path, f"condition must be a mapping, got {type(data).__name__}")
        conditions = data.get("conditions")
        if conditions is not None:
            if not isinstance(conditions, list | tuple):
                raise DefinitionError(path, "'conditions' must be a list")
            conditions = tuple(
                cls.from_dict(child, f"{path}.conditions[{i}]") for i, child in enumerate(conditions)
            )
        return cls(
            rule=data.get("rule"),
            conditions=conditions,
            entitlements=data.get("entitlements"),
            parameters=tuple(data.get("parameters") or ()),
        )


@dataclass(frozen=True, slots=True)
class RouteAction:
    """What happens when a route is invoked.

    ``"link"`` actions point at ``path`` within the application registered
    under ``location``. ``"trigger"`` actions name an event for the host.
    """

    type: str = "link"
    location: str | None = None
    path: str | None = None
    trigger: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "action") -> RouteAction:
        if not isinstance(data, Mapping):
            raise DefinitionError(path, f"action must be a mapping, got {type(data).__name__}")
        return cls(
            type=data.get("type", "link"),
            location=data.get("location"),
            path=data.get("path"),
            trigger=data.get("trigger"),
        )


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A single menu item or menu container. Never mutated after creation.

    Attributes:
        caption: Display caption.
        id: Optional identifier for invoking the route programmatically.
        action: What the item does when clicked.
        visible: Condition deciding visibility; always visible when absent.
        matches: Extra URL patterns, relative to the action's location,
            that activate the item.
        children: Nested items.
        bubble: When activated, activate the parent too and lend it this
            item's href. Useful for top-level items that lead to a child.
        properties: Arbitrary defaults for the runtime property overlay.
    """

    caption: str
    id: str | None = None
    action: RouteAction | None = None
    visible: RouteCondition | None = None
    matches: tuple[str, ...] = ()
    children: tuple[RouteDefinition, ...] = ()
    bubble: bool = False
    properties: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> RouteDefinition:
        """Build a definition tree from a JSON-shaped mapping.

        Raises ``DefinitionError`` naming the offending node when the
        input is malformed.
        """
        if not isinstance(data, Mapping):
            raise DefinitionError(path, f"route must be a mapping, got {type(data).__name__}")

        caption = data.get("caption")
        if not isinstance(caption, str):
            raise DefinitionError(path, "route requires a string 'caption'")

        prefix = f"{path}." if path else ""

        children = data.get("children") or ()
        if not isinstance(children, list | tuple):
            raise DefinitionError(path, "'children' must be a list")

        matches = data.get("matches") or ()
        if not isinstance(matches, list | tuple):
            raise DefinitionError(path, "'matches' must be a list")

        properties = data.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise DefinitionError(path, "'properties' must be a mapping")

        action = data.get("action")
        visible = data.get("visible")
        return cls(
            caption=caption,
            id=data.get("id"),
            action=RouteAction.from_dict(action, f"{prefix}action") if action is not None else None,
            visible=(
                RouteCondition.from_dict(visible, f"{prefix}visible") if visible is not None else None
            ),
            matches=tuple(matches),
            children=tuple(
                cls.from_dict(child, f"{prefix}children[{i}]") for i, child in enumerate(children)
            ),
            bubble=bool(data.get("bubble", False)),
            properties=dict(properties),
        )
