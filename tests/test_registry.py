"""Tests for the generator registry."""

import random
from pathlib import Path

import pytest

from semverfuzz.config import GenerationProfile
from semverfuzz.oracle import parse_comparator, parse_req, parse_version
from semverfuzz.registry import GeneratorRegistry, register_generator

EXAMPLES_FILE = Path(__file__).parent.parent / 'examples' / 'custom_generators.py'

BUILTINS = [
    'semver', 'version', 'semver_version', 'pre_release', 'build_metadata', 'op',
    'comparator', 'semver_comparator', 'comparator_vec', 'version_req',
    'semver_version_req',
]


def test_builtins_registered():
    names = GeneratorRegistry.names()
    assert set(BUILTINS) <= set(names)
    assert names == sorted(names)


@pytest.mark.parametrize("name", BUILTINS)
def test_builtins_produce_strings(name):
    generator = GeneratorRegistry.get(name)
    assert isinstance(generator(random.Random(0), {}), str)


def test_unknown_generator():
    assert GeneratorRegistry.get('no_such_generator') is None
    with pytest.raises(ValueError, match="Available: .*semver"):
        GeneratorRegistry.require('no_such_generator')


def test_profile_params_are_used(rng):
    params = GenerationProfile.from_dict({
        'operators': {'default_weight': 0, 'wildcard_weight': 1},
        'versions': {'probability_of_pre_release': 0.0, 'probability_of_build_metadata': 0.0},
        'comparator_vec': {'wildcard': 1, 'comparator_list': 0},
    }).to_dict()
    assert GeneratorRegistry.get('op')(rng, params) == '*'
    assert GeneratorRegistry.get('version_req')(rng, params) == '*'
    version = parse_version(GeneratorRegistry.get('version')(rng, params))
    assert version.prerelease == () and version.build == ()


def test_parsed_outputs(rng):
    parse_comparator(GeneratorRegistry.get('comparator')(rng, {}))
    parse_req(GeneratorRegistry.get('comparator_vec')(rng, {'max_comparators': 4}))
    parse_req(GeneratorRegistry.get('semver_version_req')(rng, {'max_comparators': 1}))


def test_register_decorator():
    @register_generator('test_fixed')
    def fixed(rng, params):
        return '1.0.0'

    assert GeneratorRegistry.get('test_fixed') is fixed
    assert fixed(None, {}) == '1.0.0'


def test_load_from_file(tmp_path):
    path = tmp_path / 'gens.py'
    path.write_text(
        "@register_generator('test_loaded_one')\n"
        "def one(rng, params):\n"
        "    return '1.0.0'\n"
        "\n"
        "@register_generator('test_loaded_two')\n"
        "def two(rng, params):\n"
        "    return '2.0.0'\n"
    )
    assert GeneratorRegistry.load_from_file(path) == 2
    assert GeneratorRegistry.get('test_loaded_two')(random.Random(0), {}) == '2.0.0'


def test_load_missing_file(tmp_path):
    assert GeneratorRegistry.load_from_file(tmp_path / 'missing.py') == 0


def test_load_examples_file():
    GeneratorRegistry.load_from_file(EXAMPLES_FILE)
    rng = random.Random(1)

    name, _, quoted = GeneratorRegistry.get('cargo_dependency')(rng, {}).partition(' = ')
    assert name in ('serde', 'rand', 'regex', 'tokio')
    parse_comparator(quoted.strip('"'))

    tag = GeneratorRegistry.get('release_tag')(rng, {'prefix': 'release-'})
    parse_version(tag[len('release-'):])

    assert ' <' in GeneratorRegistry.get('npm_range')(rng, {})


def test_reloading_replaces(tmp_path):
    path = tmp_path / 'again.py'
    path.write_text(
        "@register_generator('test_reloaded')\n"
        "def gen(rng, params):\n"
        "    return '0.0.1'\n"
    )
    assert GeneratorRegistry.load_from_file(path) == 1
    assert GeneratorRegistry.load_from_file(path) == 1
    assert GeneratorRegistry.require('test_reloaded')(random.Random(0), {}) == '0.0.1'
