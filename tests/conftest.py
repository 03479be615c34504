"""Shared fixtures for the Intelligence Reports tests."""
import os
import sys

import pytest

# Add the project root to the path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from intel_reports.config.settings import ReportSettings
from intel_reports.models.report import SearchableEntity
from intel_reports.notifications.notifier import Notifier


@pytest.fixture
def settings(tmp_path):
    """Settings with short timers and a temporary output directory."""
    return ReportSettings(
        generation_service_url="http://generation.test",
        directory_service_url="http://directory.test",
        public_base_url="https://spacenexus.test",
        search_debounce_seconds=0.01,
        output_dir=str(tmp_path / "output"),
    )


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def companies():
    """A handful of directory entries."""
    return [
        SearchableEntity(slug="spacex", name="SpaceX", sector="launch-services", tier=1),
        SearchableEntity(slug="rocket-lab", name="Rocket Lab", sector="launch-services", tier=1),
        SearchableEntity(slug="planet", name="Planet Labs", sector="earth-observation", tier=2),
        SearchableEntity(slug="iridium", name="Iridium", sector="satellite-communications", tier=2),
        SearchableEntity(slug="astroscale", name="Astroscale", sector="in-space-services", tier=3),
        SearchableEntity(slug="relativity", name="Relativity Space", sector="launch-services", tier=3),
    ]
