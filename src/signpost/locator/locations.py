"""Logical location ids and descriptor seed helpers.

Every console application is deployed four ways: production in the US,
production in the EU, a shared integration stack, and a local dev server.
``ui_node()`` produces the matching descriptors for one application::

    nodes = [
        *ui_node(Location.OVERVIEW_UI, "overview", 4213),
        *ui_node(Location.INCIDENTS_UI, "incidents", 8001),
    ]
"""

from signpost.locator.descriptor import LocationDescriptor


class Location:
    """Stable, environment-independent ids for console applications."""

    OVERVIEW_UI = "cd17:overview"
    INCIDENTS_UI = "cd17:incidents"
    DASHBOARDS_UI = "cd19:dashboards"
    ACCOUNTS_UI = "cd17:accounts"
    SEARCH_UI = "cd17:search"
    HEALTH_UI = "cd17:health"
    EXPOSURES_UI = "cd17:exposures"
    LANDING_UI = "cd17:landing"


def ui_node(
    loc_type_id: str,
    app_code: str,
    dev_port: int,
    domain: str = "example",
) -> list[LocationDescriptor]:
    """Return the production, integration and development descriptors of an app."""
    return [
        LocationDescriptor(
            loc_type_id=loc_type_id,
            environment="production",
            residency="US",
            uri=f"https://console.{app_code}.{domain}.com",
        ),
        LocationDescriptor(
            loc_type_id=loc_type_id,
            environment="production",
            residency="EMEA",
            uri=f"https://console.{app_code}.{domain}.co.uk",
        ),
        LocationDescriptor(
            loc_type_id=loc_type_id,
            environment="integration",
            uri=f"https://console.{app_code}.product.dev.{domain}.com",
            aliases=(f"https://{app_code}.pr-*.ui-dev.{domain}.com",),
        ),
        LocationDescriptor(
            loc_type_id=loc_type_id,
            environment="development",
            uri=f"http://localhost:{dev_port}",
        ),
    ]
