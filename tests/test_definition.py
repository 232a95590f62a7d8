"""Tests for signpost.routing.definition — immutable route definitions."""

import pytest

from signpost.errors import DefinitionError
from signpost.routing.definition import RouteAction, RouteCondition, RouteDefinition


class TestRouteCondition:
    def test_leaf(self) -> None:
        condition = RouteCondition.from_dict({"entitlements": "a", "parameters": ["aaid"]})
        assert condition.is_group is False
        assert condition.entitlements == "a"
        assert condition.parameters == ("aaid",)

    def test_group(self) -> None:
        condition = RouteCondition.from_dict(
            {"rule": "any", "conditions": [{"entitlements": "a"}, {"entitlements": "b"}]}
        )
        assert condition.is_group is True
        assert condition.conditions is not None
        assert [c.entitlements for c in condition.conditions] == ["a", "b"]

    def test_empty_group_is_still_a_group(self) -> None:
        assert RouteCondition(rule="all", conditions=()).is_group is True

    def test_rule_alone_is_a_leaf(self) -> None:
        assert RouteCondition(rule="all").is_group is False

    def test_bad_conditions(self) -> None:
        with pytest.raises(DefinitionError, match="'conditions' must be a list"):
            RouteCondition.from_dict({"rule": "any", "conditions": "a"})

    def test_bad_nested_condition_path(self) -> None:
        with pytest.raises(DefinitionError) as exc_info:
            RouteCondition.from_dict({"rule": "any", "conditions": [{}, "nope"]})
        assert exc_info.value.path == "visible.conditions[1]"


class TestRouteAction:
    def test_defaults_to_link(self) -> None:
        action = RouteAction.from_dict({"location": "cd17:overview", "path": "/#/"})
        assert action.type == "link"
        assert action.location == "cd17:overview"

    def test_trigger(self) -> None:
        action = RouteAction.from_dict({"type": "trigger", "trigger": "open-help"})
        assert action.trigger == "open-help"
        assert action.location is None

    def test_link_without_location_parses(self) -> None:
        action = RouteAction.from_dict({"type": "link", "path": "/#/"})
        assert action.type == "link"
        assert action.location is None

    def test_not_a_mapping(self) -> None:
        with pytest.raises(DefinitionError, match="action must be a mapping"):
            RouteAction.from_dict("link")  # type: ignore[arg-type]


class TestRouteDefinition:
    def test_minimal(self) -> None:
        definition = RouteDefinition.from_dict({"caption": "Home"})
        assert definition.caption == "Home"
        assert definition.id is None
        assert definition.action is None
        assert definition.visible is None
        assert definition.matches == ()
        assert definition.children == ()
        assert definition.bubble is False
        assert definition.properties == {}

    def test_full(self) -> None:
        definition = RouteDefinition.from_dict(
            {
                "id": "incidents",
                "caption": "Incidents",
                "action": {"type": "link", "location": "cd17:incidents", "path": "/#/"},
                "visible": {"entitlements": "incidents"},
                "matches": ["/#/summary/.*"],
                "bubble": True,
                "properties": {"icon": "warning"},
                "children": [{"caption": "Summary"}],
            }
        )
        assert definition.id == "incidents"
        assert definition.action == RouteAction(location="cd17:incidents", path="/#/")
        assert definition.visible == RouteCondition(entitlements="incidents")
        assert definition.matches == ("/#/summary/.*",)
        assert definition.bubble is True
        assert definition.properties == {"icon": "warning"}
        assert definition.children[0].caption == "Summary"

    def test_frozen(self) -> None:
        definition = RouteDefinition(caption="Home")
        with pytest.raises(AttributeError):
            definition.caption = "Away"  # type: ignore[misc]

    def test_properties_copied(self) -> None:
        source = {"caption": "Home", "properties": {"icon": "home"}}
        definition = RouteDefinition.from_dict(source)
        source["properties"]["icon"] = "changed"  # type: ignore[index]
        assert definition.properties == {"icon": "home"}

    def test_missing_caption(self) -> None:
        with pytest.raises(DefinitionError, match="caption"):
            RouteDefinition.from_dict({"children": []})

    def test_bad_children(self) -> None:
        with pytest.raises(DefinitionError, match="'children' must be a list"):
            RouteDefinition.from_dict({"caption": "Home", "children": {"caption": "x"}})

    def test_bad_matches(self) -> None:
        with pytest.raises(DefinitionError, match="'matches' must be a list"):
            RouteDefinition.from_dict({"caption": "Home", "matches": "/#/.*"})

    def test_bad_properties(self) -> None:
        with pytest.raises(DefinitionError, match="'properties' must be a mapping"):
            RouteDefinition.from_dict({"caption": "Home", "properties": ["icon"]})

    def test_nested_action_error_path(self) -> None:
        with pytest.raises(DefinitionError) as exc_info:
            RouteDefinition.from_dict(
                {
                    "caption": "Root",
                    "children": [
                        {"caption": "A", "children": [{"caption": "B", "action": "/#/"}]}
                    ],
                }
            )
        assert exc_info.value.path == "children[0].children[0].action"
