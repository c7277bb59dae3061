"""
Configuration for pytest to set up the proper import paths and shared fixtures.
"""

import sys
from pathlib import Path
import pytest


# Add the parent directory to Python path so we can import from lazy, records, etc.
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))

# Import after path setup
from people import person_methods, sample_people


@pytest.fixture
def methods():
    """Fixture providing the default person method table."""
    return person_methods()


@pytest.fixture
def people(methods):
    """Fixture providing a fresh sample roster: Ben 19, Matthew 17, Emma 15."""
    return sample_people(methods)


@pytest.fixture
def pipeline_env(monkeypatch):
    """Fixture clearing PIPELINE_* variables so settings start from defaults."""
    for key in ("PIPELINE_INCREMENT", "PIPELINE_ADULT_AGE", "PIPELINE_KEY_FIELD", "PIPELINE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
