"""Signpost — cross-application locations and menus for web consoles.

Infers the deployment context from the URL a console runs at, resolves
logical application ids to the right base URIs, and keeps a menu tree's
visibility, links and activation in step with the current URL.

Basic usage::

    from signpost import LocatorMatrix, RouteNode, ui_node, Location

    locator = LocatorMatrix(
        [*ui_node(Location.OVERVIEW_UI, "overview", 4213)],
        acting_uri="https://console.overview.example.com/#/",
    )
    menu = RouteNode.from_dict(host, menu_json)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "UNSET",
    "ConfigurationError",
    "ContextPattern",
    "DefinitionError",
    "Location",
    "LocationContext",
    "LocationDescriptor",
    "LocatorConfig",
    "LocatorMatrix",
    "NullRoutingHost",
    "RouteAction",
    "RouteCondition",
    "RouteDefinition",
    "RouteNode",
    "RoutingHost",
    "SignpostError",
    "escape_location_pattern",
    "ui_node",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "UNSET": "signpost.routing.route",
    "ConfigurationError": "signpost.errors",
    "ContextPattern": "signpost.locator.patterns",
    "DefinitionError": "signpost.errors",
    "Location": "signpost.locator.locations",
    "LocationContext": "signpost.locator.descriptor",
    "LocationDescriptor": "signpost.locator.descriptor",
    "LocatorConfig": "signpost.config",
    "LocatorMatrix": "signpost.locator.matrix",
    "NullRoutingHost": "signpost.routing.host",
    "RouteAction": "signpost.routing.definition",
    "RouteCondition": "signpost.routing.definition",
    "RouteDefinition": "signpost.routing.definition",
    "RouteNode": "signpost.routing.route",
    "RoutingHost": "signpost.routing.host",
    "SignpostError": "signpost.errors",
    "escape_location_pattern": "signpost.locator.patterns",
    "ui_node": "signpost.locator.locations",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import signpost`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
