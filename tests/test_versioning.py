"""
tests.test_versioning
Unit tests for the bundled versioning schemes and their registry.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import pytest
from packaging.specifiers import SpecifierSet
from packaging.version import Version

from preoccupied.upgrades.versioning import (
    NpmVersioning, Pep440Versioning, PoetryVersioning, SemverVersioning,
    get_versioning, list_versionings)
from preoccupied.upgrades.versioning.pep440 import min_version
from preoccupied.upgrades.versioning.poetry import parse_constraint


def test_registry():
    """
    Schemes are looked up by their id.
    """

    assert list_versionings() == ["npm", "pep440", "poetry", "semver"]
    for name in list_versionings():
        assert get_versioning(name).id == name

    assert isinstance(get_versioning("semver"), SemverVersioning)
    assert get_versioning("npm") is get_versioning("npm")


def test_registry_unknown():
    with pytest.raises(ValueError) as error:
        get_versioning("calver")

    assert "Invalid versioning: calver" in str(error.value)


@pytest.mark.parametrize(
    "scheme, expected",
    [
        pytest.param(SemverVersioning(), False, id="semver"),
        pytest.param(NpmVersioning(), True, id="npm"),
        pytest.param(Pep440Versioning(), False, id="pep440"),
        pytest.param(PoetryVersioning(), False, id="poetry"),
    ])
def test_unstable_major_upgrade_trait(scheme, expected):
    assert scheme.allow_unstable_major_upgrades is expected


class TestSemver:
    """
    Strict semantic versioning.
    """

    scheme = SemverVersioning()


    @pytest.mark.parametrize(
        "version, expected",
        [
            ("1.0.0", True),
            ("v1.0.0", True),
            ("1.0.0-rc.1+build.5", True),
            ("1.0", False),
            ("=1.0.0", False),
            ("invalid.version", False),
            ("", False),
        ])
    def test_is_version(self, version, expected):
        assert self.scheme.is_version(version) is expected
        assert self.scheme.is_valid(version) is expected


    def test_ranges_are_not_valid(self):
        assert not self.scheme.is_valid("^1.0.0")
        assert not self.scheme.is_valid(">=1.0.0")


    def test_ordering(self):
        assert self.scheme.is_greater_than("1.10.0", "1.9.0")
        assert self.scheme.is_greater_than("1.0.0", "1.0.0-rc.1")
        assert not self.scheme.is_greater_than("1.0.0", "1.0.0")
        assert not self.scheme.is_greater_than("garbage", "1.0.0")
        assert not self.scheme.is_greater_than("1.0.0", "garbage")

        assert self.scheme.equals("v1.0.1", "1.0.1")
        assert not self.scheme.equals("1.0.1", "1.0.2")
        assert not self.scheme.equals("garbage", "garbage")


    def test_stability(self):
        assert self.scheme.is_stable("1.0.0")
        assert not self.scheme.is_stable("1.0.0-rc.1")
        assert not self.scheme.is_stable("garbage")


    def test_components(self):
        assert self.scheme.get_major("2.3.4") == 2
        assert self.scheme.get_minor("2.3.4") == 3
        assert self.scheme.get_patch("2.3.4") == 4
        assert self.scheme.get_major("garbage") is None
        assert self.scheme.get_minor("garbage") is None
        assert self.scheme.get_patch("garbage") is None


    @pytest.mark.parametrize(
        "version, constraint, expected",
        [
            pytest.param("1.2.0", "1.2.0", True, id="exact"),
            pytest.param("1.2.1", "1.2.0", False, id="exact-mismatch"),
            pytest.param("1.5.0", ">=1.0.0 <2.0.0", True, id="comparators"),
            pytest.param("2.0.0", ">=1.0.0, <2.0.0", False, id="comparators-comma"),
            pytest.param("1.5.0", "!=1.5.0", False, id="not-equal"),
            pytest.param("1.5.0", "^1.0.0", False, id="caret-unsupported"),
            pytest.param("garbage", ">=1.0.0", False, id="bad-version"),
            pytest.param("1.5.0", "", False, id="empty"),
        ])
    def test_matches(self, version, constraint, expected):
        assert self.scheme.matches(version, constraint) is expected


class TestNpm:
    """
    npm flavoured semantic versioning.
    """

    scheme = NpmVersioning()


    @pytest.mark.parametrize(
        "value, is_version, is_valid",
        [
            ("1.2.3", True, True),
            ("v1.2.3", True, True),
            ("^1.2.3", False, True),
            ("1.x", False, True),
            ("<1 || >=3", False, True),
            ("not-a-range", False, False),
            ("", False, False),
        ])
    def test_classification(self, value, is_version, is_valid):
        assert self.scheme.is_version(value) is is_version
        assert self.scheme.is_valid(value) is is_valid


    def test_ordering(self):
        assert self.scheme.is_greater_than("1.2.3-beta", "1.0.0-alpha")
        assert not self.scheme.is_greater_than("1.0.0+b", "1.0.0+a")
        assert self.scheme.equals("1.0.0+a", "1.0.0+b")
        assert not self.scheme.equals("1.0.0", "1.0.1")
        assert not self.scheme.is_greater_than("^2.0.0", "1.0.0")


    def test_stability_and_components(self):
        assert self.scheme.is_stable("1.0.0")
        assert not self.scheme.is_stable("1.0.0-beta")
        assert not self.scheme.is_stable("nope")
        assert self.scheme.get_major("1.2.3-beta") == 1
        assert self.scheme.get_minor("1.2.3-beta") == 2
        assert self.scheme.get_patch("1.2.3-beta") == 3
        assert self.scheme.get_major("nope") is None


    @pytest.mark.parametrize(
        "version, constraint, expected",
        [
            ("1.4.0", "^1.2.0", True),
            ("2.0.0", "^1.2.0", False),
            ("0.5.0", "<1 || >=3", True),
            ("3.1.0", "<1 || >=3", True),
            ("2.0.0", "<1 || >=3", False),
            ("^1.2.0", "^1.2.0", True),
            ("garbage", "^1.2.0", False),
        ])
    def test_matches(self, version, constraint, expected):
        assert self.scheme.matches(version, constraint) is expected


class TestPep440:
    """
    PEP 440 versions and specifiers.
    """

    scheme = Pep440Versioning()


    @pytest.mark.parametrize(
        "value, is_version, is_valid",
        [
            ("1.0.post1", True, True),
            ("v1.0", True, True),
            (">=1.0,<2", False, True),
            ("~=1.4", False, True),
            ("^1.0", False, False),
            ("one", False, False),
        ])
    def test_classification(self, value, is_version, is_valid):
        assert self.scheme.is_version(value) is is_version
        assert self.scheme.is_valid(value) is is_valid


    def test_stability(self):
        assert self.scheme.is_stable("1.0")
        assert self.scheme.is_stable("1.0.post1")
        assert not self.scheme.is_stable("1.0rc1")
        assert not self.scheme.is_stable("1.0.dev1")


    def test_ordering_and_components(self):
        assert self.scheme.is_greater_than("1.10", "1.9")
        assert self.scheme.is_greater_than("1.0", "1.0rc1")
        assert self.scheme.equals("1.0", "1.0.0")
        assert self.scheme.get_major("1.2.3") == 1
        assert self.scheme.get_minor("1.2.3") == 2
        assert self.scheme.get_patch("1.2.3") == 3
        assert self.scheme.get_patch("1.2") == 0
        assert self.scheme.get_patch("nope") is None


    @pytest.mark.parametrize(
        "version, constraint, expected",
        [
            pytest.param("1.5", ">=1.0,<2", True, id="in-set"),
            pytest.param("2.0", ">=1.0,<2", False, id="outside-set"),
            pytest.param("1.0", "1.0.0", True, id="bare-version"),
            pytest.param("2.0rc1", ">=1.0", True, id="prerelease-admitted"),
            pytest.param(">=1.0,<2", ">=1.0,<2", True, id="specifier-as-version"),
            pytest.param("nope", ">=1.0", False, id="bad-version"),
        ])
    def test_matches(self, version, constraint, expected):
        assert self.scheme.matches(version, constraint) is expected


    @pytest.mark.parametrize(
        "specs, expected",
        [
            pytest.param([">1.0"], Version("1.0.1"), id="exclusive"),
            pytest.param([">=1.2,<2"], Version("1.2"), id="inclusive"),
            pytest.param(["==1.4.*"], Version("1.4"), id="wildcard"),
            pytest.param(["<3"], Version("0"), id="upper-only"),
            pytest.param([">=3,<2", ">=5"], Version("5"), id="alternatives"),
            pytest.param([">=3,<2"], None, id="unsatisfiable"),
        ])
    def test_min_version(self, specs, expected):
        assert min_version(SpecifierSet(spec) for spec in specs) == expected


class TestPoetry:
    """
    Poetry constraints.
    """

    scheme = PoetryVersioning()


    @pytest.mark.parametrize(
        "version, constraint, expected",
        [
            pytest.param("1.9.0", "^1.2.3", True, id="caret"),
            pytest.param("2.0.0", "^1.2.3", False, id="caret-upper"),
            pytest.param("0.2.9", "^0.2.3", True, id="caret-zero-major"),
            pytest.param("0.3.0", "^0.2.3", False, id="caret-zero-major-upper"),
            pytest.param("0.0.3", "^0.0.3", True, id="caret-zero-minor"),
            pytest.param("0.0.4", "^0.0.3", False, id="caret-zero-minor-upper"),
            pytest.param("1.2.9", "~1.2.3", True, id="tilde"),
            pytest.param("1.3.0", "~1.2.3", False, id="tilde-upper"),
            pytest.param("1.9", "~1", True, id="tilde-major"),
            pytest.param("2.0", "~1", False, id="tilde-major-upper"),
            pytest.param("1.2.7", "1.2.*", True, id="wildcard"),
            pytest.param("1.3.0", "1.2.*", False, id="wildcard-outside"),
            pytest.param("1.2.3", "=1.2.3", True, id="equals"),
            pytest.param("1.5.0", ">=1.0,<2.0", True, id="comma"),
            pytest.param("1.5.0", ">= 1.0 < 2.0", True, id="whitespace"),
            pytest.param("0.5.0", "<1.0 || >=3.0", True, id="or-first"),
            pytest.param("2.0.0", "<1.0 || >=3.0", False, id="or-neither"),
            pytest.param("9.9.9", "*", True, id="any"),
            pytest.param("^1.2", "^1.2", True, id="constraint-as-version"),
            pytest.param("nope", "^1.2", False, id="bad-version"),
        ])
    def test_matches(self, version, constraint, expected):
        assert self.scheme.matches(version, constraint) is expected


    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1.2.3", True),
            ("^1.2", True),
            ("~1.2 || ^3", True),
            ("!=1.5.*", True),
            ("===1.0", False),
            ("nope", False),
            ("", False),
        ])
    def test_is_valid(self, value, expected):
        assert self.scheme.is_valid(value) is expected


    def test_parse_constraint(self):
        assert parse_constraint("^1.2.3") == [SpecifierSet(">=1.2.3,<2")]
        assert parse_constraint("~1.2 || *") == [
            SpecifierSet(">=1.2,<1.3"), SpecifierSet("")]
        assert parse_constraint("^1.2 ||") is None


    def test_semver_style_prereleases(self):
        assert self.scheme.is_version("1.0.0-beta.1")
        assert not self.scheme.is_stable("1.0.0-beta.1")
        assert self.scheme.is_greater_than("1.0.0", "1.0.0-beta.1")


# The end.
