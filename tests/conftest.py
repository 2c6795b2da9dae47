"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_report_json():
    """Sample document whose shape survives a round trip."""
    return {
        "title": "Analytical Engine Notes",
        "version": 2,
        "draft": False,
        "reviewer": None,
        "owner": {
            "name": "Ada",
            "email": "ada@example.com"
        },
        "tags": ["math", "engines"],
        "sections": [
            {"heading": "Intro", "pages": 3},
            {"heading": "Method", "pages": 12}
        ]
    }


@pytest.fixture
def sample_profile_json():
    """Sample biographical profile with named skill records."""
    return {
        "name": "Grace",
        "skills": {
            "cobol": {"level": "expert", "years": 20},
            "fortran": {"level": "advanced", "years": 8}
        },
        "languages": ["english", "german"]
    }


@pytest.fixture
def sample_report_text(sample_report_json):
    """Sample report serialized as JSON text."""
    return json.dumps(sample_report_json)
