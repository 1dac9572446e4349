"""Shared fixtures: fresh stores per test"""
import itertools

import pytest

from paintmap.core.clock import MicroClock
from paintmap.state import build_state


@pytest.fixture
def state():
    return build_state()


@pytest.fixture
def frozen_clock():
    """Clock whose wall-clock source never advances"""
    return MicroClock(source=itertools.repeat(1_700_000_000.0).__next__)
