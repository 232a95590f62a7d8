"""URI template escaping and the built-in context patterns.

A URI template is a literal URL prefix in which ``*`` stands for one
host or port segment::

    "https://console.*.example.co.uk"   -> any console application, UK
    "https://*.pr-*.ui-dev.example.com" -> pull-request preview hosts
"""

import re
from dataclasses import dataclass

from signpost.errors import ConfigurationError

# Regex metacharacters escaped in the literal parts of a template.
# ``*`` is absent: it is the wildcard marker.
_METACHARACTERS = re.compile(r"[-/\\^$+?.()|\[\]{}]")

WILDCARD_CLASS = "[a-zA-Z0-9_]+"


def escape_location_pattern(template: str) -> str:
    """Convert a URI template into an anchored regular expression.

    Literal metacharacters are escaped, each ``*`` becomes
    ``[a-zA-Z0-9_]+``, and any suffix is allowed so paths and query
    strings after the host still match::

        "https://dashboards.pr-*.ui-dev.example.com"
        -> ^https:\\/\\/dashboards\\.pr\\-[a-zA-Z0-9_]+\\.ui\\-dev\\.example\\.com.*$
    """
    escaped = _METACHARACTERS.sub(r"\\\g<0>", template)
    return "^" + escaped.replace("*", WILDCARD_CLASS) + ".*$"


@dataclass(frozen=True, slots=True)
class ContextPattern:
    """A URI template that implies a deployment context.

    Used by ``LocatorMatrix.set_acting_uri()`` to infer environment and
    residency from the URL the console is running at.
    """

    template: str
    environment: str
    residency: str

    def __post_init__(self) -> None:
        if not self.template:
            msg = f"Context pattern for {self.environment}/{self.residency} has an empty template."
            raise ConfigurationError(msg)

    @property
    def regex(self) -> str:
        return escape_location_pattern(self.template)

    def matches(self, url: str) -> bool:
        return re.match(self.regex, url) is not None


DEFAULT_CONTEXT_PATTERNS: tuple[ContextPattern, ...] = (
    # Production, regional variants
    ContextPattern("https://console.*.example.co.uk", "production", "EMEA"),
    ContextPattern("https://console.*.example.com", "production", "US"),
    # Integration
    ContextPattern("https://console.*.product.dev.example.com", "integration", "US"),
    ContextPattern("https://*.pr-*.ui-dev.example.com", "integration", "US"),
    # Local development
    ContextPattern("http://localhost:*", "development", "US"),
)
