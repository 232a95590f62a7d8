"""Routing — menu trees with computed visibility, links and activation.

Immutable ``RouteDefinition`` trees are mirrored into mutable ``RouteNode``
trees bound to a routing host, which supplies the current URL, route
parameters and entitlement checks.
"""
