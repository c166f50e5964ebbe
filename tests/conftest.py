"""Shared fixtures for the machine tests."""

import pytest

from alphabet_and_plugboard import Alphabet
from debug import Debug
from suites import IROHA, LATIN


@pytest.fixture
def latin():
    return Alphabet(LATIN)


@pytest.fixture
def iroha():
    return Alphabet(IROHA)


@pytest.fixture
def quiet_debug():
    """Leave the shared component map as it was found."""
    dbg = Debug()
    before = dbg.status()
    yield dbg
    dbg.components.update(before)
    dbg.toggle_global(True)
