#!/usr/bin/env python3
"""
Example custom generators for semverfuzz.

Each generator is a function that takes:
  - rng: A random.Random instance for reproducible randomness
  - params: A dictionary of parameters (a generation profile, plus any
    keys of your own)

To use these generators:
  SemverFuzzer(GenerationConfig(kind="cargo_dependency"),
               generators_file=Path("examples/custom_generators.py"))
"""

import random
from typing import Any, Dict

from semverfuzz import arb_comparator_string, arb_semver_op, arb_version


# Use the decorator to register generators
# (GeneratorRegistry and register_generator are injected by semverfuzz when loading)

@register_generator("cargo_dependency")
def gen_cargo_dependency(rng: random.Random, params: Dict[str, Any]) -> str:
    """Generate a Cargo.toml dependency line like 'serde = ">=1.2.3"'.

    Params:
        crate_names: Names to pick from (default: a few common crates)
    """
    names = params.get('crate_names', ['serde', 'rand', 'regex', 'tokio'])
    return f'{rng.choice(names)} = "{arb_comparator_string(rng)}"'


@register_generator("release_tag")
def gen_release_tag(rng: random.Random, params: Dict[str, Any]) -> str:
    """Generate a git release tag like 'v1.2.3-rc.1'.

    Params:
        prefix: Tag prefix (default: 'v')
    """
    return f"{params.get('prefix', 'v')}{arb_version(rng)}"


@register_generator("npm_range")
def gen_npm_range(rng: random.Random, params: Dict[str, Any]) -> str:
    """Generate a space-separated npm style range from two comparators."""
    lower = arb_version(rng)
    upper = arb_version(rng)
    op = arb_semver_op(rng)
    return f"{op.symbol}{lower} <{upper}"
