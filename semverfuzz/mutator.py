"""Mutation strategies for producing malformed versions and requirements."""

import random
import re
from typing import Callable

from .oracle import OracleError, parse_comparator, parse_req, parse_version
from .versions import is_overflow_error

Validator = Callable[[str], bool]


def _accepts(parse: Callable[[str], object], text: str) -> bool:
    # An overflow is still well-formed per the grammar.
    try:
        parse(text)
    except OracleError as e:
        return is_overflow_error(e)
    return True


def accepts_version(text: str) -> bool:
    return _accepts(parse_version, text)


def accepts_comparator(text: str) -> bool:
    return _accepts(parse_comparator, text)


def accepts_req(text: str) -> bool:
    return _accepts(parse_req, text)


class Mutator:
    """Mutates valid strings into ones the grammar rejects.

    Each strategy may by chance yield something still valid (dropping a
    character from ``10.0.0`` gives ``0.0.0``), so results are checked
    against ``validator`` and retried.
    """

    # Never legal anywhere in a version or requirement
    ILLEGAL_CHARS = '@#$%&!_/\\:;?"\'`|()[]{}'
    # Printable ASCII for blind replacements
    VALUE_CHARS = ''.join(chr(i) for i in range(32, 127))
    # Used when no strategy produced an invalid string
    FALLBACK_SUFFIX = '@'

    def __init__(self, rng: random.Random, validator: Validator, max_attempts: int = 10):
        self.rng = rng
        self.validator = validator
        self.max_attempts = max_attempts

    def mutate(self, text: str, target_invalid: bool = True) -> str:
        """Mutate ``text`` if targeting invalid output."""
        if not target_invalid:
            return text

        strategies = [
            self._leading_zero,
            self._drop_component,
            self._extra_component,
            self._empty_identifier,
            self._illegal_char,
            self._misplaced_wildcard,
            self._mutate_string,
        ]

        for _ in range(self.max_attempts):
            strategy = self.rng.choice(strategies)
            mutated = strategy(text)
            if mutated != text and not self.validator(mutated):
                return mutated
        return text + self.FALLBACK_SUFFIX

    def _leading_zero(self, text: str) -> str:
        """Prefix a number with a zero."""
        starts = [m.start() for m in re.finditer(r'(?<![0-9A-Za-z-])[0-9]', text)]
        if not starts:
            return self._illegal_char(text)
        pos = self.rng.choice(starts)
        return text[:pos] + '0' + text[pos:]

    def _drop_component(self, text: str) -> str:
        """Remove one dotted component."""
        dots = [i for i, c in enumerate(text) if c == '.']
        if not dots:
            return text[1:]
        pos = self.rng.choice(dots)
        end = pos + 1
        while end < len(text) and text[end] not in '.-+,':
            end += 1
        return text[:pos] + text[end:]

    def _extra_component(self, text: str) -> str:
        """Add a fourth numeric component to the release part."""
        match = re.search(r'[0-9]+\.[0-9*]+\.[0-9*]+', text)
        if not match:
            return text + '.0.0.0'
        return text[:match.end()] + f".{self.rng.randint(0, 9)}" + text[match.end():]

    def _empty_identifier(self, text: str) -> str:
        """Leave an empty identifier or a dangling separator."""
        choice = self.rng.choice(['..', 'trailing_dot', 'dash', 'plus', 'comma'])
        if choice == '..':
            dots = [i for i, c in enumerate(text) if c == '.']
            if dots:
                pos = self.rng.choice(dots)
                return text[:pos] + '.' + text[pos:]
            return text + '..'
        if choice == 'trailing_dot':
            return text + '.'
        if choice == 'dash':
            return text + '-' if '+' not in text else text.replace('+', '-+', 1)
        if choice == 'plus':
            return text + '+'
        return text + ','

    def _illegal_char(self, text: str) -> str:
        """Insert a character that is never legal."""
        pos = self.rng.randint(0, len(text))
        return text[:pos] + self.rng.choice(self.ILLEGAL_CHARS) + text[pos:]

    def _misplaced_wildcard(self, text: str) -> str:
        """Put a wildcard where it cannot go."""
        if self.rng.random() < 0.5:
            return '*,' + text
        digits = [i for i, c in enumerate(text) if c.isdigit()]
        if not digits:
            return text + '.*'
        pos = self.rng.choice(digits)
        return text[:pos] + '*' + text[pos:] + '.1'

    def _mutate_string(self, text: str) -> str:
        """Randomly add, remove, or replace a character."""
        if not text:
            return self.rng.choice(self.VALUE_CHARS)

        mutation = self.rng.choice(['add', 'remove', 'replace'])

        if mutation == 'add':
            pos = self.rng.randint(0, len(text))
            return text[:pos] + self.rng.choice(self.VALUE_CHARS) + text[pos:]
        elif mutation == 'remove' and len(text) > 1:
            pos = self.rng.randint(0, len(text) - 1)
            return text[:pos] + text[pos + 1:]
        else:
            pos = self.rng.randint(0, len(text) - 1)
            return text[:pos] + self.rng.choice(self.VALUE_CHARS) + text[pos + 1:]
