"""Corpus generation: many named values at once, some deliberately broken."""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .config import GenerationConfig, GenerationProfile
from .mutator import Mutator, Validator, accepts_comparator, accepts_req, accepts_version
from .registry import GeneratorRegistry
from .schema import ProfileValidator

logger = logging.getLogger(__name__)

# Kinds whose output can be checked, and therefore mutated into invalid cases.
VALIDATORS: Dict[str, Validator] = {
    'semver': accepts_version,
    'version': accepts_version,
    'semver_version': accepts_version,
    'comparator': accepts_comparator,
    'semver_comparator': accepts_comparator,
    'comparator_vec': accepts_req,
    'version_req': accepts_req,
    'semver_version_req': accepts_req,
}


@dataclass(frozen=True)
class FuzzCase:
    """One generated string and whether it is meant to be accepted."""
    text: str
    valid: bool


class SemverFuzzer:
    """Generates a corpus of one kind of value."""

    def __init__(self, gen_config: GenerationConfig,
                 profile: Optional[GenerationProfile] = None,
                 generators_file: Optional[Path] = None):
        if not 0.0 <= gen_config.invalid_ratio <= 1.0:
            raise ValueError("Invalid ratio must be between 0.0 and 1.0")

        self.gen_config = gen_config
        self.profile = profile or GenerationProfile()
        self.rng = random.Random(gen_config.seed)

        if generators_file is not None:
            loaded = GeneratorRegistry.load_from_file(generators_file)
            logger.info("Loaded %d custom generators from %s", loaded, generators_file)

        self.generator = GeneratorRegistry.require(gen_config.kind)

        validator = VALIDATORS.get(gen_config.kind)
        if gen_config.invalid_ratio > 0 and validator is None:
            raise ValueError(f"Cannot generate invalid '{gen_config.kind}' values: no validator")
        self.mutator = Mutator(self.rng, validator) if validator else None

    @classmethod
    def from_profile_file(cls, gen_config: GenerationConfig, profile_path: Path,
                          schema_path: Optional[Path] = None) -> 'SemverFuzzer':
        """Build a fuzzer from a JSON profile checked against the schema."""
        profile = ProfileValidator(schema_path).load(profile_path)
        return cls(gen_config, profile)

    def run(self) -> List[FuzzCase]:
        """Generate ``num_generations`` cases."""
        logger.info("Generating %d '%s' cases (invalid ratio %.1f%%)",
                    self.gen_config.num_generations, self.gen_config.kind,
                    self.gen_config.invalid_ratio * 100)

        params = self.profile.to_dict()
        cases = []
        for gen_idx in range(self.gen_config.num_generations):
            should_be_invalid = self.rng.random() < self.gen_config.invalid_ratio
            text = self.generator(self.rng, params)
            if should_be_invalid:
                text = self.mutator.mutate(text)
            cases.append(FuzzCase(text=text, valid=not should_be_invalid))

            if self.gen_config.verbose:
                logger.debug("Case %d/%d: %.80s", gen_idx + 1,
                             self.gen_config.num_generations, text)

        invalid_count = sum(1 for case in cases if not case.valid)
        logger.info("Generation complete: %d valid, %d invalid",
                    len(cases) - invalid_count, invalid_count)
        return cases
