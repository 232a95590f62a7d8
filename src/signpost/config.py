"""Locator configuration.

LocatorConfig decides how a LocatorMatrix classifies acting URLs and what
context it reports before any URL is recognized.
"""

from dataclasses import dataclass

from signpost.locator.patterns import DEFAULT_CONTEXT_PATTERNS, ContextPattern


@dataclass(frozen=True, slots=True)
class LocatorConfig:
    """Locator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = LocatorConfig(default_residency="EMEA")
        locator = LocatorMatrix(nodes, config=config)
    """

    # Placeholder used by ``set_acting_uri(True)`` before the real URL is known.
    # Must not match any context pattern.
    default_acting_uri: str = "http://acting-uri.invalid"

    # Context before any acting URL has been recognized
    default_environment: str = "production"
    default_residency: str = "US"

    # Ordered; first match wins
    context_patterns: tuple[ContextPattern, ...] = DEFAULT_CONTEXT_PATTERNS
