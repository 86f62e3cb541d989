"""Unit tests for the demo entry point."""

import json

import pytest

from social_registry import main as demo
from social_registry.core.network import SocialNetwork


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test in an empty directory without a configured data file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SOCIAL_REGISTRY_DATA_FILE", raising=False)


def test_run_leaves_network_consistent():
    """Test that the demo run undoes its temporary client."""
    network = SocialNetwork()
    network.load(demo.SAMPLE_RECORDS)

    demo.run(network, report_depth=4, history_limit=5)

    assert network.count() == len(demo.SAMPLE_RECORDS)
    assert network.lookup_by_name("Demo") is None
    assert network.pending_count() == 0
    assert len(network.history()) == 2


def test_run_confirms_processed_requests(caplog):
    """Test that processed requests are confirmed unless the follow cap blocks them."""
    network = SocialNetwork()
    network.load(demo.SAMPLE_RECORDS)

    demo.run(network, report_depth=4, history_limit=5)

    assert network.lookup_by_name("Eva").following == {"Carla"}
    assert network.lookup_by_name("Carla").followers_count == 1
    assert network.lookup_by_name("Carla").following == {"Ana", "Bob"}
    assert network.lookup_by_name("Eva").followers_count == 0
    assert "Carla -> Eva rejected" in caplog.text


def test_main_with_sample_data():
    """Test the entry point without a data file."""
    assert demo.main() == 0


def test_main_with_rejected_data_file(monkeypatch, tmp_path):
    """Test that a rejected load makes the entry point fail."""
    path = tmp_path / "clients.json"
    path.write_text(json.dumps({"clients": [{"name": "Ana", "score": 1}, {"name": "Ana", "score": 2}]}))
    monkeypatch.setenv("SOCIAL_REGISTRY_DATA_FILE", str(path))

    assert demo.main() == 1


def test_main_with_unknown_log_level(monkeypatch):
    """Test that an unknown log level does not stop the entry point."""
    monkeypatch.setenv("SOCIAL_REGISTRY_LOG_LEVEL", "VERBOSE")
    assert demo.main() == 0
