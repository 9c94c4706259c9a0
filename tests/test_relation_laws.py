"""Algebraic laws the predicates must satisfy for arbitrary path pairs."""

from __future__ import annotations

import itertools
import sys

import pytest

from apathy import is_ancestor, is_descendant, is_equal, is_sibling

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX path literals")

BASE = "/srv/project/src"

SAMPLES = [
    "",
    ".",
    "..",
    "../..",
    "/",
    "/srv",
    "/srv/project",
    "foo",
    "./foo/",
    "foo/bar",
    "foo/../bar",
    "../sibling",
    "../../project/src/foo",
    "/other/tree",
    "//foo",
    "//",
]

PAIRS = list(itertools.product(SAMPLES, repeat=2))


@pytest.mark.parametrize("p", SAMPLES)
def test_reflexive(p):
    assert is_equal(p, p, base=BASE)
    assert is_descendant(p, p, base=BASE)
    assert is_ancestor(p, p, base=BASE)
    assert is_sibling(p, p, base=BASE)


@pytest.mark.parametrize("p,q", PAIRS)
def test_descendant_ancestor_duality(p, q):
    assert is_descendant(p, q, base=BASE) == is_ancestor(q, p, base=BASE)


@pytest.mark.parametrize("p,q", PAIRS)
def test_sibling_and_equal_are_symmetric(p, q):
    assert is_sibling(p, q, base=BASE) == is_sibling(q, p, base=BASE)
    assert is_equal(p, q, base=BASE) == is_equal(q, p, base=BASE)


@pytest.mark.parametrize("p,q", PAIRS)
def test_mutual_descent_means_equal(p, q):
    both = is_descendant(p, q, base=BASE) and is_descendant(q, p, base=BASE)
    assert both == is_equal(p, q, base=BASE)


@pytest.mark.parametrize("p", SAMPLES)
def test_everything_descends_from_root(p):
    assert is_descendant(p, "/", base=BASE)
    assert is_ancestor("/", p, base=BASE)


@pytest.mark.parametrize("p", SAMPLES)
def test_omitted_other_means_base(p):
    assert is_descendant(p, base=BASE) == is_descendant(p, BASE, base=BASE)
    assert is_ancestor(p, base=BASE) == is_ancestor(p, BASE, base=BASE)
    assert is_sibling(p, base=BASE) == is_sibling(p, BASE, base=BASE)
    assert is_equal(p, base=BASE) == is_equal(p, BASE, base=BASE)
