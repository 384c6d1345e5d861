
import pytest
import sys
from decouple import config
from fastapi.testclient import TestClient
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Hypothesis configuration for property-based testing
from hypothesis import settings as hypothesis_settings
from playmusic.core.config import Settings
from playmusic.main import create_app
from playmusic.services.store import TrackStore, VideoStore
from tests.helpers.library_data import SEED_TRACKS, write_json

# Register Hypothesis profiles
hypothesis_settings.register_profile("fast", max_examples=50, deadline=None)
hypothesis_settings.register_profile("thorough", max_examples=1000, deadline=None)
hypothesis_settings.load_profile(config("HYPOTHESIS_PROFILE", default="fast"))


def pytest_collection_modifyitems(items):
    """Automatically order tests: unit tests first, then property tests, then E2E tests.

    Individual tests marked with @pytest.mark.order("last") will run at the very end.
    """
    for item in items:
        if item.get_closest_marker("order"):
            continue

        test_file = str(item.fspath)
        if "test_unit_" in test_file:
            item.add_marker(pytest.mark.order(1))
        elif "test_props_" in test_file:
            item.add_marker(pytest.mark.order(2))
        elif "test_e2e_" in test_file:
            item.add_marker(pytest.mark.order(3))


@pytest.fixture
def seed_file(tmp_path):
    """A seed library file with two tracks and no ids."""
    return write_json(tmp_path / "seed" / "library.json", SEED_TRACKS)


@pytest.fixture
def app_settings(tmp_path):
    """Settings pointing every data file at a temporary directory, without a seed."""
    return Settings(DATA_DIR=tmp_path / "data", SEED_FILE=tmp_path / "no-seed.json")


@pytest.fixture
def track_store(app_settings):
    """Empty track store backed by a temporary file."""
    return TrackStore(app_settings.tracks_path, seed_path=app_settings.SEED_FILE)


@pytest.fixture
def video_store(app_settings):
    """Empty video store backed by a temporary file."""
    return VideoStore(app_settings.videos_path)


@pytest.fixture
def client(app_settings):
    """TestClient for an app with empty collections.

    Yields:
        TestClient with the lifespan (and therefore the stores) started
    """
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client


