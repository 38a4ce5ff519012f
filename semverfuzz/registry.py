"""Registry of named string generators.

Generators are functions that take ``(rng, params)`` and return a string.
``params`` is a plain dict shaped like a ``GenerationProfile``; missing
keys fall back to the profile defaults.
"""

import importlib.util
import logging
import random
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .aggregates import arb_semver_version_req, arb_version_req
from .comparators import arb_comparator_string, arb_full_comparator_vec
from .config import GenerationProfile
from .operators import arb_semver_op
from .primitives import arb_build_metadata_string, arb_pre_release_string
from .versions import arb_semver, arb_semver_comparator, arb_semver_version, arb_version

logger = logging.getLogger(__name__)

# (rng, params) -> generated text
GeneratorFunc = Callable[[random.Random, Dict[str, Any]], str]


class GeneratorRegistry:
    """Named generators, so a corpus can ask for a kind of value by name.

    Registering an existing name replaces its generator.
    """

    _generators: Dict[str, GeneratorFunc] = {}

    @classmethod
    def register(cls, name: str, func: GeneratorFunc) -> None:
        if name in cls._generators and cls._generators[name] is not func:
            logger.debug("Replacing generator '%s'", name)
        cls._generators[name] = func

    @classmethod
    def get(cls, name: str) -> Optional[GeneratorFunc]:
        return cls._generators.get(name)

    @classmethod
    def require(cls, name: str) -> GeneratorFunc:
        """Like ``get``, but an unknown name raises ``ValueError``."""
        func = cls._generators.get(name)
        if func is None:
            raise ValueError(f"Generator '{name}' not found. Available: {', '.join(cls.names())}")
        return func

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._generators)

    @classmethod
    def load_from_file(cls, filepath: Path) -> int:
        """Run a Python file that registers generators.

        ``register_generator`` and ``GeneratorRegistry`` are available in
        the file without importing them. A missing file loads nothing.

        Returns: Number of names the file registered or replaced.
        """
        if not filepath.exists():
            return 0

        spec = importlib.util.spec_from_file_location(filepath.stem, filepath)
        if spec is None or spec.loader is None:
            return 0

        module = importlib.util.module_from_spec(spec)
        module.GeneratorRegistry = cls
        module.register_generator = register_generator

        previous = dict(cls._generators)
        spec.loader.exec_module(module)
        loaded = [name for name, func in cls._generators.items() if previous.get(name) is not func]
        logger.debug("Generators from %s: %s", filepath, ', '.join(loaded) or 'none')
        return len(loaded)


def register_generator(name: str):
    """Register the decorated function under ``name``.

        @register_generator("stable_version")
        def gen_stable(rng, params):
            return str(arb_version(rng, VersionWeights(0.0, 0.0)))
    """
    def decorator(func: GeneratorFunc) -> GeneratorFunc:
        GeneratorRegistry.register(name, func)
        return func
    return decorator


def _profile(params: Dict[str, Any]) -> GenerationProfile:
    return GenerationProfile.from_dict(params)


@register_generator("semver")
def gen_semver(rng: random.Random, params: Dict[str, Any]) -> str:
    return arb_semver(rng)


@register_generator("version")
def gen_version(rng: random.Random, params: Dict[str, Any]) -> str:
    return str(arb_version(rng, _profile(params).versions))


@register_generator("semver_version")
def gen_semver_version(rng: random.Random, params: Dict[str, Any]) -> str:
    return str(arb_semver_version(rng, _profile(params).versions))


@register_generator("pre_release")
def gen_pre_release(rng: random.Random, params: Dict[str, Any]) -> str:
    return arb_pre_release_string(rng)


@register_generator("build_metadata")
def gen_build_metadata(rng: random.Random, params: Dict[str, Any]) -> str:
    return arb_build_metadata_string(rng)


@register_generator("op")
def gen_op(rng: random.Random, params: Dict[str, Any]) -> str:
    return arb_semver_op(rng, _profile(params).operators).value


@register_generator("comparator")
def gen_comparator(rng: random.Random, params: Dict[str, Any]) -> str:
    return arb_comparator_string(rng, _profile(params).comparators)


@register_generator("semver_comparator")
def gen_semver_comparator(rng: random.Random, params: Dict[str, Any]) -> str:
    profile = _profile(params)
    return str(arb_semver_comparator(rng, profile.operators,
                                     profile.versions.probability_of_pre_release))


@register_generator("comparator_vec")
def gen_comparator_vec(rng: random.Random, params: Dict[str, Any]) -> str:
    profile = _profile(params)
    return str(arb_full_comparator_vec(rng, profile.max_comparators, profile.comparator_vec,
                                       comparator_weights=profile.comparators))


@register_generator("version_req")
def gen_version_req(rng: random.Random, params: Dict[str, Any]) -> str:
    profile = _profile(params)
    return str(arb_version_req(rng, profile.max_comparators, profile.comparator_vec,
                               comparator_weights=profile.comparators))


@register_generator("semver_version_req")
def gen_semver_version_req(rng: random.Random, params: Dict[str, Any]) -> str:
    profile = _profile(params)
    return str(arb_semver_version_req(rng, max(profile.max_comparators, 2)))
