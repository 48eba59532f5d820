from __future__ import annotations

import random

import pytest

from salvo.core.models import FleetPlacement
from tests.helpers import make_valid_fleet


@pytest.fixture
def valid_fleet() -> FleetPlacement:
    return make_valid_fleet()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
