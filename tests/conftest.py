"""Shared test configuration, pytest markers and fixtures."""

import pytest

from applicant_ranker.models.schemas.feature_vector import FeatureVector
from tests.samples import make_training_set


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: trains and persists a real LightGBM model (slow)"
    )


@pytest.fixture
def training_set() -> list[FeatureVector]:
    return make_training_set()


@pytest.fixture
def model_dir(tmp_path):
    return tmp_path / "models"
