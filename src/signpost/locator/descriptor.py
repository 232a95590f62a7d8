"""Location descriptors and the shared location context."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from signpost.errors import ConfigurationError
from signpost.locator.patterns import escape_location_pattern


@dataclass(frozen=True, slots=True)
class LocationDescriptor:
    """A concrete deployment of a logical location.

    One descriptor exists per (environment, residency) variant of an
    application. ``residency`` is ``None`` for variants that serve every
    region, such as integration and local development builds.

    ``match_pattern`` is derived from ``uri`` and ``aliases`` when not
    given explicitly.
    """

    loc_type_id: str
    environment: str
    uri: str
    residency: str | None = None
    aliases: tuple[str, ...] = ()
    match_pattern: str = ""

    def __post_init__(self) -> None:
        if not self.match_pattern:
            templates = (self.uri, *self.aliases)
            pattern = "|".join(escape_location_pattern(t) for t in templates)
            object.__setattr__(self, "match_pattern", pattern)

    def matches(self, url: str) -> bool:
        """True if *url* belongs to this deployment."""
        return re.match(self.match_pattern, url) is not None

    def serves(self, environment: str, residency: str | None) -> bool:
        """True if this descriptor applies to the given context."""
        if self.environment != environment:
            return False
        return self.residency is None or self.residency == residency

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LocationDescriptor:
        """Build a descriptor from external configuration.

        Accepts camelCase (``locTypeId``, ``matchPattern``) or snake_case keys.
        Raises ``ConfigurationError`` when a required key is missing.
        """

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in data:
                    return data[key]
            return None

        loc_type_id = pick("loc_type_id", "locTypeId")
        environment = pick("environment")
        uri = pick("uri")
        missing = [
            name
            for name, value in (("locTypeId", loc_type_id), ("environment", environment), ("uri", uri))
            if not value
        ]
        if missing:
            msg = f"Location descriptor {dict(data)!r} is missing {', '.join(missing)}."
            raise ConfigurationError(msg)

        aliases = pick("aliases") or ()
        if not isinstance(aliases, list | tuple) or not all(isinstance(a, str) for a in aliases):
            msg = f"Location descriptor {loc_type_id!r} aliases must be a list of URI templates."
            raise ConfigurationError(msg)
        aliases = tuple(aliases)

        return cls(
            loc_type_id=loc_type_id,
            environment=environment,
            uri=uri,
            residency=pick("residency"),
            aliases=aliases,
            match_pattern=pick("match_pattern", "matchPattern") or "",
        )


@dataclass(slots=True)
class LocationContext:
    """The deployment context inferred from the acting URL.

    Owned by a ``LocatorMatrix`` and updated in place whenever the acting
    URL changes, so references handed out by ``get_context()`` stay current.
    """

    environment: str = "production"
    residency: str = "US"
    acting_uri: str | None = None
