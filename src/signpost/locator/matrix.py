"""The location registry.

``LocatorMatrix`` holds every known location descriptor and the context
inferred from the acting URL. Lookups by logical id honour that context;
lookups by URL ignore it.

Lifecycle::

    locator = LocatorMatrix()
    locator.set_locations(nodes)
    locator.set_acting_uri("https://console.overview.example.co.uk/#/")
    incidents = locator.get_node(Location.INCIDENTS_UI)   # the EMEA variant

Not thread-safe. A matrix is meant to have one logical owner performing
reads and writes in sequence.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Literal

from signpost.config import LocatorConfig
from signpost.locator.descriptor import LocationContext, LocationDescriptor
from signpost.locator.patterns import escape_location_pattern

logger = logging.getLogger("signpost.locator")

DescriptorPredicate = Callable[[LocationDescriptor], bool]


class LocatorMatrix:
    """Registry of location descriptors plus the current location context."""

    __slots__ = ("_config", "_context", "_nodes")

    escape_location_pattern = staticmethod(escape_location_pattern)

    def __init__(
        self,
        locations: Iterable[LocationDescriptor] = (),
        acting_uri: str | Literal[True] | None = None,
        config: LocatorConfig | None = None,
    ) -> None:
        self._config = config or LocatorConfig()
        self._context = LocationContext(
            environment=self._config.default_environment,
            residency=self._config.default_residency,
        )
        self._nodes: list[LocationDescriptor] = []
        self.set_locations(locations)
        if acting_uri is not None:
            self.set_acting_uri(acting_uri)

    @property
    def config(self) -> LocatorConfig:
        return self._config

    @property
    def locations(self) -> tuple[LocationDescriptor, ...]:
        """All registered descriptors, in registration order."""
        return tuple(self._nodes)

    def set_locations(self, locations: Iterable[LocationDescriptor]) -> None:
        """Replace the descriptor set wholesale."""
        self._nodes = list(locations)

    # -- Context --

    def set_acting_uri(self, acting_uri: str | Literal[True]) -> None:
        """Set the URL the console is acting at and infer the context from it.

        Pass ``True`` to use the configured placeholder URL while the real
        one is not known yet. When no context pattern recognizes the URL,
        the previous environment and residency are kept.
        """
        if acting_uri is True:
            acting_uri = self._config.default_acting_uri

        self._context.acting_uri = acting_uri
        inferred = self.context_for_uri(acting_uri)
        if inferred is None:
            logger.debug(
                "Acting URI %r matches no context pattern; keeping %s/%s",
                acting_uri,
                self._context.environment,
                self._context.residency,
            )
            return

        self._context.environment = inferred.environment
        self._context.residency = inferred.residency
        logger.debug(
            "Acting URI %r implies %s/%s", acting_uri, inferred.environment, inferred.residency
        )

    def get_context(self) -> LocationContext:
        """Return the shared context. It is updated in place, never replaced."""
        return self._context

    def context_for_uri(self, url: str) -> LocationContext | None:
        """Classify *url* without touching the registry's own context.

        Returns ``None`` when no context pattern matches.
        """
        for pattern in self._config.context_patterns:
            if pattern.matches(url):
                return LocationContext(
                    environment=pattern.environment,
                    residency=pattern.residency,
                    acting_uri=url,
                )
        return None

    # -- Lookup --

    def get_node(
        self,
        loc_type_id: str,
        context: LocationContext | None = None,
    ) -> LocationDescriptor | None:
        """Return the descriptor for *loc_type_id* in the given context.

        Defaults to the current context. Returns ``None`` when the location
        has no descriptor for that context; there is no fallback to another
        environment or residency.
        """
        ctx = context if context is not None else self._context
        return self.find_one(
            lambda node: node.loc_type_id == loc_type_id
            and node.serves(ctx.environment, ctx.residency)
        )

    def get_node_by_uri(self, url: str) -> LocationDescriptor | None:
        """Return the first descriptor whose match pattern claims *url*."""
        return self.find_one(lambda node: node.matches(url))

    def resolve_url(
        self,
        loc_type_id: str,
        path: str = "",
        context: LocationContext | None = None,
    ) -> str | None:
        """Return the absolute URL of *path* within a location, or ``None``."""
        node = self.get_node(loc_type_id, context)
        if node is None:
            return None
        return node.uri + path

    def search(self, predicate: DescriptorPredicate) -> list[LocationDescriptor]:
        """Return every descriptor satisfying *predicate*, in registration order."""
        return [node for node in self._nodes if predicate(node)]

    def find_one(self, predicate: DescriptorPredicate) -> LocationDescriptor | None:
        """Return the first descriptor satisfying *predicate*, or ``None``."""
        for node in self._nodes:
            if predicate(node):
                return node
        return None

    def __repr__(self) -> str:
        ctx = self._context
        return f"<LocatorMatrix {len(self._nodes)} locations, {ctx.environment}/{ctx.residency}>"
