"""Shared catalogs for resolution tests."""

import string

import pytest

from resdeps.resolution import ResourceCatalog, ResourceEntry

ORDINALS = [
    "first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth",
    "ninth", "tenth", "eleventh", "twelfth", "thirteenth", "fourteenth",
    "fifteenth", "sixteenth", "seventeenth", "eighteenth", "nineteenth",
    "twentieth", "twenty-first", "twenty-second", "twenty-third",
    "twenty-fourth", "twenty-fifth", "twenty-sixth",
]  # fmt: skip


def build_catalog(requires: dict[str, list[str]]) -> ResourceCatalog:
    """Build a catalog from ``{id: requires}`` with placeholder metadata."""
    return ResourceCatalog(
        ResourceEntry(
            resource=rid,
            name=rid.upper(),
            sdesc=f"Resource {rid.upper()}",
            ldesc=f"Test resource {rid}",
            category="test",
            requires=tuple(reqs),
        )
        for rid, reqs in requires.items()
    )


@pytest.fixture
def make_catalog():
    """Factory building a catalog from ``{id: requires}``."""
    return build_catalog


@pytest.fixture
def alphabet_catalog() -> ResourceCatalog:
    """Twenty-six resources where each letter requires the one before it."""
    entries = []
    for index, letter in enumerate(string.ascii_lowercase):
        if index == 0:
            ldesc = "The first resource in the alphabetical order"
            requires: tuple[str, ...] = ()
        else:
            previous = string.ascii_lowercase[index - 1]
            ldesc = f"The {ORDINALS[index]} resource, dependent on {previous.upper()}"
            requires = (previous,)
        entries.append(
            ResourceEntry(
                resource=letter,
                name=letter.upper(),
                sdesc=f"Resource {letter.upper()}",
                ldesc=ldesc,
                category="example",
                requires=requires,
            ),
        )
    return ResourceCatalog(entries)


@pytest.fixture
def linear_catalog() -> ResourceCatalog:
    """c requires b, b requires a."""
    return build_catalog({"a": [], "b": ["a"], "c": ["b"]})


@pytest.fixture
def diamond_catalog() -> ResourceCatalog:
    """top requires left and right, both of which require base."""
    return build_catalog(
        {
            "base": [],
            "left": ["base"],
            "right": ["base"],
            "top": ["left", "right"],
        },
    )


@pytest.fixture
def branching_catalog() -> ResourceCatalog:
    """r requires x and y, x requires z."""
    return build_catalog({"z": [], "x": ["z"], "y": [], "r": ["x", "y"]})


@pytest.fixture
def cyclic_catalog() -> ResourceCatalog:
    """a and b require each other, d hangs off the cycle, e is clean."""
    return build_catalog({"a": ["b"], "b": ["a"], "d": ["a"], "e": []})
