"""SemVer 2.0.0 grammar patterns and published limits.

The patterns are the ones from https://semver.org/ with two changes:

* ASCII only: ``[0-9]`` is used instead of ``\\d``, which also matches
  non-ASCII digits in Python.
* No leading ``^`` / trailing ``$`` where the pattern is meant to be
  embedded or fed to a string generator.
"""

# Full version string. Numeric components are unbounded here.
SEMVER_REGEX = (
    r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    r"(?:-((?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# "MAJOR.MINOR.PATCH". The structured Version type does not support
# anything over U64_MAX.
MAJOR_MINOR_PATCH_REGEX = r"^(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"

# Any single MAJOR, MINOR or PATCH component.
ANY_MAJOR_MINOR_PATCH_COMPONENT = r"^(0|[1-9][0-9]*)"

# Pre-release, sometimes, with the `-` prefix.
SOMETIMES_PRERELEASE_REGEX = (
    r"(?:-((?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
)

# Build metadata, sometimes, with the `+` prefix.
SOMETIMES_BUILD_METADATA_REGEX = r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"

# Pre-release, always, without the `-` prefix.
ALWAYS_PRERELEASE_REGEX = (
    r"(?:((?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))"
)

# Build metadata, always, without the `+` prefix.
ALWAYS_BUILD_METADATA_REGEX = r"(?:([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))"

# Hard limit on comparators in a requirement string. The oracle does not
# expose it, so it is re-encoded here and pinned by a test.
MAX_COMPARATORS_IN_VERSION_REQ_STRING = 32

U64_MAX = 2 ** 64 - 1

DEFAULT_PROBABILITY_OF_PRE_RELEASE = 0.5
DEFAULT_PROBABILITY_OF_BUILD_METADATA = 0.5
