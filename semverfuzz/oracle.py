"""Cargo-dialect SemVer parsing and matching on top of semantic_version.

This is the authoritative parser the generators are checked against. It
follows the requirement syntax of Rust's ``semver`` crate (the dialect
Cargo uses), which ``semantic_version.SimpleSpec`` only approximates:

* numeric components are capped at ``u64::MAX``;
* a requirement holds at most 32 comparators;
* a bare ``*`` is only legal as the whole requirement;
* build metadata on a comparator is accepted and ignored.

Version values are plain ``semantic_version.Version`` objects and
matching is delegated to ``semantic_version.SimpleSpec``.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

import semantic_version


# Text carried by every numeric overflow failure. Callers match on it.
OVERFLOW_MARKER = "version number exceeds u64::MAX"

_U64_MAX = 2 ** 64 - 1
# The Cargo `semver` crate caps a VersionReq at 32 comparators (its private
# MAX_COMPARATORS) and fails with "excessive number of version comparators".
# The grammar module publishes the same number; tests pin the two together.
_COMPARATOR_LIMIT = 32

_WILDCARDS = ("*", "x", "X")

_VERSION = re.compile(
    r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?"
)

_COMPARATOR = re.compile(
    r"(?P<op>>=|<=|=|>|<|~|\^)?\s*"
    r"(?P<major>[0-9]+|[*xX])"
    r"(?:\.(?P<minor>[0-9]+|[*xX])"
    r"(?:\.(?P<patch>[0-9]+|[*xX]))?)?"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?"
)

_PRE_IDENTIFIER = re.compile(r"0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*")
_BUILD_IDENTIFIER = re.compile(r"[0-9a-zA-Z-]+")


class OracleError(ValueError):
    """Raised when a string is rejected by the parser."""


class Op(Enum):
    """Comparison operators of a comparator."""
    EXACT = "="
    GREATER = ">"
    GREATER_EQ = ">="
    LESS = "<"
    LESS_EQ = "<="
    TILDE = "~"
    CARET = "^"
    WILDCARD = "*"

    @property
    def symbol(self) -> str:
        """Prefix written before the version; a wildcard has none."""
        return "" if self is Op.WILDCARD else self.value


_OPS_BY_SYMBOL = {op.value: op for op in Op if op is not Op.WILDCARD}

# SimpleSpec prefixes used for matching.
_SIMPLE_PREFIXES = {
    Op.EXACT: "==",
    Op.GREATER: ">",
    Op.GREATER_EQ: ">=",
    Op.LESS: "<",
    Op.LESS_EQ: "<=",
    Op.TILDE: "~",
    Op.CARET: "^",
    Op.WILDCARD: "==",
}


@dataclass(frozen=True)
class Prerelease:
    """Dot-separated pre-release identifiers; empty when absent."""
    identifiers: Tuple[str, ...] = ()

    EMPTY: ClassVar["Prerelease"]

    @classmethod
    def parse(cls, text: str) -> "Prerelease":
        if not text:
            return cls.EMPTY
        identifiers = tuple(text.split("."))
        for identifier in identifiers:
            if not _PRE_IDENTIFIER.fullmatch(identifier):
                raise OracleError(f"invalid pre-release identifier {identifier!r} in {text!r}")
        return cls(identifiers)

    @property
    def is_empty(self) -> bool:
        return not self.identifiers

    def __str__(self) -> str:
        return ".".join(self.identifiers)


@dataclass(frozen=True)
class BuildMetadata:
    """Dot-separated build metadata identifiers; empty when absent."""
    identifiers: Tuple[str, ...] = ()

    EMPTY: ClassVar["BuildMetadata"]

    @classmethod
    def parse(cls, text: str) -> "BuildMetadata":
        if not text:
            return cls.EMPTY
        identifiers = tuple(text.split("."))
        for identifier in identifiers:
            if not _BUILD_IDENTIFIER.fullmatch(identifier):
                raise OracleError(f"invalid build metadata identifier {identifier!r} in {text!r}")
        return cls(identifiers)

    @property
    def is_empty(self) -> bool:
        return not self.identifiers

    def __str__(self) -> str:
        return ".".join(self.identifiers)


Prerelease.EMPTY = Prerelease()
BuildMetadata.EMPTY = BuildMetadata()


@dataclass(frozen=True)
class Comparator:
    """One operator plus a (partial) version. Carries no build metadata."""
    op: Op
    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    pre: Prerelease = field(default_factory=Prerelease)

    def matches(self, version: semantic_version.Version) -> bool:
        return semantic_version.SimpleSpec(self._simple_clause()).match(version)

    def _simple_clause(self) -> str:
        # Partial versions cannot carry a pre-release in SimpleSpec, and a
        # patch without a minor is meaningless, so both are dropped.
        text = str(self.major)
        if self.minor is not None:
            text += f".{self.minor}"
            if self.patch is not None:
                text += f".{self.patch}"
                if not self.pre.is_empty:
                    text += f"-{self.pre}"
        return _SIMPLE_PREFIXES[self.op] + text

    def __str__(self) -> str:
        parts = [str(self.major)]
        if self.minor is not None:
            parts.append(str(self.minor))
            if self.patch is not None:
                parts.append(str(self.patch))
            elif self.op is Op.WILDCARD:
                parts.append("*")
        elif self.op is Op.WILDCARD:
            parts.append("*")
        text = self.op.symbol + ".".join(parts)
        if self.patch is not None and self.minor is not None and not self.pre.is_empty:
            text += f"-{self.pre}"
        return text


@dataclass(frozen=True)
class VersionReq:
    """A set of comparators that must all match. Empty means ``*``."""
    comparators: Tuple[Comparator, ...] = ()

    def matches(self, version: semantic_version.Version) -> bool:
        if not self.comparators:
            return True
        clauses = ",".join(c._simple_clause() for c in self.comparators)
        return semantic_version.SimpleSpec(clauses).match(version)

    def __str__(self) -> str:
        if not self.comparators:
            return "*"
        return ", ".join(str(c) for c in self.comparators)


def _parse_number(text: str, position: str) -> int:
    if len(text) > 1 and text[0] == "0":
        raise OracleError(f"invalid leading zero in {position} version number")
    value = int(text)
    if value > _U64_MAX:
        raise OracleError(f"{position} {OVERFLOW_MARKER}")
    return value


def parse_version(text: str) -> semantic_version.Version:
    """Parse a full ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` version."""
    if not text:
        raise OracleError("empty string, expected a semver version")
    match = _VERSION.fullmatch(text)
    if match is None:
        raise OracleError(f"unexpected character in version {text!r}")

    _parse_number(match.group("major"), "major")
    _parse_number(match.group("minor"), "minor")
    _parse_number(match.group("patch"), "patch")
    Prerelease.parse(match.group("pre") or "")
    BuildMetadata.parse(match.group("build") or "")

    try:
        return semantic_version.Version(text)
    except ValueError as e:
        raise OracleError(f"invalid version {text!r}: {e}") from e


def _parse_comparator(text: str) -> Optional[Comparator]:
    """Parse one comparator; returns None for a bare wildcard."""
    match = _COMPARATOR.fullmatch(text.strip())
    if match is None:
        raise OracleError(f"unexpected character in comparator {text!r}")

    op_symbol, major_t, minor_t, patch_t, pre_t, build_t = match.group(
        "op", "major", "minor", "patch", "pre", "build"
    )
    if pre_t is not None or build_t is not None:
        if minor_t is None or patch_t is None or patch_t in _WILDCARDS or minor_t in _WILDCARDS:
            raise OracleError(f"unexpected pre-release or build metadata after partial version in {text!r}")

    if major_t in _WILDCARDS:
        if op_symbol is not None:
            raise OracleError(f"unexpected wildcard after operator in {text!r}")
        if (minor_t is not None and minor_t not in _WILDCARDS) or (
            patch_t is not None and patch_t not in _WILDCARDS
        ):
            raise OracleError(f"unexpected character after wildcard in {text!r}")
        return None

    major = _parse_number(major_t, "major")
    minor: Optional[int] = None
    patch: Optional[int] = None
    wildcard = False

    if minor_t is None or minor_t in _WILDCARDS:
        wildcard = minor_t is not None
        if patch_t is not None and patch_t not in _WILDCARDS:
            raise OracleError(f"unexpected character after wildcard in {text!r}")
    else:
        minor = _parse_number(minor_t, "minor")
        if patch_t is None or patch_t in _WILDCARDS:
            wildcard = patch_t is not None
        else:
            patch = _parse_number(patch_t, "patch")

    if op_symbol is not None:
        op = _OPS_BY_SYMBOL[op_symbol]
    elif wildcard:
        op = Op.WILDCARD
    else:
        op = Op.CARET

    pre = Prerelease.parse(pre_t or "")
    # Accepted for validity, ignored for matching.
    BuildMetadata.parse(build_t or "")
    return Comparator(op=op, major=major, minor=minor, patch=patch, pre=pre)


def parse_comparator(text: str) -> Comparator:
    """Parse a single comparator such as ``>=1.2.3-rc.1`` or ``~1.*``."""
    comparator = _parse_comparator(text)
    if comparator is None:
        raise OracleError("a bare wildcard (*) is only valid as a whole version req")
    return comparator


def parse_req(text: str) -> VersionReq:
    """Parse a comma-separated requirement string."""
    if not text.strip():
        raise OracleError("empty string, expected a semver version")

    parts = text.split(",")
    if len(parts) > _COMPARATOR_LIMIT:
        raise OracleError("excessive number of version comparators")

    comparators: List[Comparator] = []
    wildcard = False
    for part in parts:
        if not part.strip():
            raise OracleError(f"unexpected end of input while parsing comparator in {text!r}")
        comparator = _parse_comparator(part)
        if comparator is None:
            wildcard = True
        else:
            comparators.append(comparator)

    if wildcard:
        if len(parts) > 1:
            raise OracleError("wildcard req (*) must be the only comparator in the version req")
        return VersionReq()
    return VersionReq(tuple(comparators))


def matches(req: VersionReq, version: semantic_version.Version) -> bool:
    return req.matches(version)
