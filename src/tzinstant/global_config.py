"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only the shared
defaults that the parser, the dual-zone wrapper and the CLI import.

Anything that needs to be configured per caller (local timezone, format list)
is passed to constructors; these constants are only the fallbacks.
"""

from typing import Final

# Timezone identifiers
UTC_TIMEZONE: Final = "UTC"
# "Z" (Zulu) is accepted anywhere a timezone identifier is and means UTC
ZULU_ALIAS: Final = "Z"
UTC_ALIASES: Final = frozenset({UTC_TIMEZONE, ZULU_ALIAS})

# Formats tried by InstantParser, in order of precedence
PLAIN_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
# %z accepts a literal "Z" as well as +HH:MM offsets
ISO_ZULU_FORMAT: Final = "%Y-%m-%dT%H:%M:%S%z"
DEFAULT_FORMATS: Final[tuple[str, ...]] = (PLAIN_FORMAT, ISO_ZULU_FORMAT)

# Rendering of DualZoneInstant (always applied to the UTC side)
DEFAULT_RENDER_FORMAT: Final = "%Y-%m-%dT%H:%M:%SZ"
