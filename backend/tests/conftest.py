"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathedit.editor.session import PathEditor


# Sample path data

QUADRATIC_PATH = "M 100,200 Q 200,100 300,200"

MIXED_CASE_PATH = "M 100,200 Q 200,100 300,200 q 25,-50 50,0"

EVERY_KIND_PATH = (
    "M 10,10 L 20,20 H 30 V 40 C 50,50 60,60 70,70 S 80,80 90,90 "
    "Q 100,100 110,110 T 120,120 A 5,5 0 0 1 130,130 Z"
)

RELATIVE_PATH = "m 10,10 l 20,0 h 10 v 10 c 5,5 10,5 15,0 s 10,-5 15,0 q 5,5 10,0 t 10,0 a 5,5 0 0 1 10,0 z"

MESSY_PATH = "M10 10,20,20L30-5 h.5v1e1   c1,2,3,4,5,6z"

# Paths that must round-trip through format(parse(...)) unchanged after one pass
VALID_PATHS = [
    QUADRATIC_PATH,
    MIXED_CASE_PATH,
    EVERY_KIND_PATH,
    RELATIVE_PATH,
    MESSY_PATH,
    "M 0.1234567,-0.0000001 L 1e-7,3.14159265",
    "m0 0a10 10 0 1010 10",
    "M 50,200 C 50,200 66.6667,166.667 100,150",
    "M 0,0 L 10,0 Z M 20,20 l 5,5 z",
]

INVALID_PATHS = [
    "X 10,10",
    "M 10",
    "M 10,10 L",
    "L 10,10",
    "M 10,10,",
    "M 10,10 Z 5",
    "M 1e,5",
    "M 10,10 A 5,5 0 2 1 20,20",
    "M 10,10 L 5,,5",
]


@pytest.fixture
def quadratic_path() -> str:
    return QUADRATIC_PATH


@pytest.fixture
def mixed_case_path() -> str:
    return MIXED_CASE_PATH


@pytest.fixture
def editor() -> PathEditor:
    return PathEditor(QUADRATIC_PATH)


@pytest.fixture
def mixed_editor() -> PathEditor:
    return PathEditor(MIXED_CASE_PATH)
