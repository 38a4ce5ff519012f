"""
semverfuzz - Semantic Versioning value generators

Grammar-driven random generation of SemVer 2.0.0 versions, operators,
comparators and version requirements for property-based testing.
"""

from .grammar import (
    SEMVER_REGEX,
    MAJOR_MINOR_PATCH_REGEX,
    ANY_MAJOR_MINOR_PATCH_COMPONENT,
    SOMETIMES_PRERELEASE_REGEX,
    SOMETIMES_BUILD_METADATA_REGEX,
    ALWAYS_PRERELEASE_REGEX,
    ALWAYS_BUILD_METADATA_REGEX,
    MAX_COMPARATORS_IN_VERSION_REQ_STRING,
    U64_MAX,
)
from .config import (
    OperatorWeights,
    VersionWeights,
    FullComparatorWeights,
    ComparatorVecWeights,
    GenerationProfile,
    GenerationConfig,
)
from .oracle import (
    Op,
    Prerelease,
    BuildMetadata,
    Comparator,
    VersionReq,
    OracleError,
    parse_version,
    parse_comparator,
    parse_req,
)
from .primitives import (
    GrammarConsistencyError,
    arb_u64,
    arb_numeric_component,
    arb_pre_release_string,
    arb_option_pre_release_string,
    arb_build_metadata_string,
    arb_option_build_metadata_string,
    arb_semver_prerelease,
    arb_option_semver_prerelease,
    arb_semver_build_metadata,
    arb_option_semver_build_metadata,
)
from .operators import arb_semver_op
from .versions import (
    arb_semver,
    arb_grammar_version,
    arb_version_weighted,
    arb_version,
    arb_semver_version_weighted,
    arb_semver_version,
    arb_semver_comparator,
    is_overflow_error,
    parse_version_tolerant,
)
from .comparators import (
    FullComparator,
    FullComparatorKind,
    ComparatorVec,
    ComparatorVecKind,
    arb_full_comparator,
    arb_comparator_list,
    arb_full_comparator_vec,
    arb_comparator_string,
)
from .aggregates import (
    arb_vec_versions,
    arb_vec_semver_versions,
    arb_vec_comparator_string,
    arb_vec_semver_comparator,
    arb_semver_version_req,
    arb_optional_semver_version_req,
    arb_version_req,
    arb_optional_version_req,
)
from .mutator import Mutator
from .registry import GeneratorRegistry, register_generator
from .schema import ProfileValidator
from .fuzzer import SemverFuzzer, FuzzCase


__version__ = '0.1.2'

__all__ = [
    # Grammar
    'SEMVER_REGEX',
    'MAJOR_MINOR_PATCH_REGEX',
    'ANY_MAJOR_MINOR_PATCH_COMPONENT',
    'SOMETIMES_PRERELEASE_REGEX',
    'SOMETIMES_BUILD_METADATA_REGEX',
    'ALWAYS_PRERELEASE_REGEX',
    'ALWAYS_BUILD_METADATA_REGEX',
    'MAX_COMPARATORS_IN_VERSION_REQ_STRING',
    'U64_MAX',

    # Configuration
    'OperatorWeights',
    'VersionWeights',
    'FullComparatorWeights',
    'ComparatorVecWeights',
    'GenerationProfile',
    'GenerationConfig',

    # Oracle
    'Op',
    'Prerelease',
    'BuildMetadata',
    'Comparator',
    'VersionReq',
    'OracleError',
    'parse_version',
    'parse_comparator',
    'parse_req',

    # Generators
    'GrammarConsistencyError',
    'arb_u64',
    'arb_numeric_component',
    'arb_pre_release_string',
    'arb_option_pre_release_string',
    'arb_build_metadata_string',
    'arb_option_build_metadata_string',
    'arb_semver_prerelease',
    'arb_option_semver_prerelease',
    'arb_semver_build_metadata',
    'arb_option_semver_build_metadata',
    'arb_semver_op',
    'arb_semver',
    'arb_grammar_version',
    'arb_version_weighted',
    'arb_version',
    'arb_semver_version_weighted',
    'arb_semver_version',
    'arb_semver_comparator',
    'is_overflow_error',
    'parse_version_tolerant',

    # Comparator shapes
    'FullComparator',
    'FullComparatorKind',
    'ComparatorVec',
    'ComparatorVecKind',
    'arb_full_comparator',
    'arb_comparator_list',
    'arb_full_comparator_vec',
    'arb_comparator_string',

    # Collections and requirements
    'arb_vec_versions',
    'arb_vec_semver_versions',
    'arb_vec_comparator_string',
    'arb_vec_semver_comparator',
    'arb_semver_version_req',
    'arb_optional_semver_version_req',
    'arb_version_req',
    'arb_optional_version_req',

    # Corpus generation
    'Mutator',
    'GeneratorRegistry',
    'register_generator',
    'ProfileValidator',
    'SemverFuzzer',
    'FuzzCase',
]
