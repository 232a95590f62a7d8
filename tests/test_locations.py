"""Tests for signpost.locator.locations — seed descriptor factory."""

from signpost.locator.locations import Location, ui_node


class TestUiNode:
    def test_four_variants(self) -> None:
        nodes = ui_node(Location.OVERVIEW_UI, "overview", 4213)
        assert [(n.environment, n.residency) for n in nodes] == [
            ("production", "US"),
            ("production", "EMEA"),
            ("integration", None),
            ("development", None),
        ]
        assert {n.loc_type_id for n in nodes} == {Location.OVERVIEW_UI}

    def test_uris(self) -> None:
        nodes = ui_node(Location.INCIDENTS_UI, "incidents", 8001)
        assert [n.uri for n in nodes] == [
            "https://console.incidents.example.com",
            "https://console.incidents.example.co.uk",
            "https://console.incidents.product.dev.example.com",
            "http://localhost:8001",
        ]

    def test_integration_alias_covers_previews(self) -> None:
        integration = ui_node(Location.INCIDENTS_UI, "incidents", 8001)[2]
        assert integration.matches("https://incidents.pr-12.ui-dev.example.com/#/summary")

    def test_custom_domain(self) -> None:
        nodes = ui_node(Location.SEARCH_UI, "search", 8080, domain="acme")
        assert nodes[0].uri == "https://console.search.acme.com"
        assert nodes[1].uri == "https://console.search.acme.co.uk"
