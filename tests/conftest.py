"""
Shared fixtures for sizing engine tests.
"""

import pytest

from bess_sizing.config import EngineConfig
from bess_sizing.inputs import SizingInput
from bess_sizing.profile_generator import generate_hourly_profiles


@pytest.fixture
def default_input():
    """Allgemein site: 50 MWh consumption, 60 MWh PV"""
    return SizingInput()


@pytest.fixture(scope="session")
def default_series():
    return generate_hourly_profiles(50000, 60000, "Allgemein")


@pytest.fixture
def small_config():
    """Short candidate list to keep optimizer tests fast"""
    return EngineConfig(
        candidate_sizes=[20.0, 50.0, 100.0, 200.0],
        comparison_sizes=[50.0, 100.0],
    )
