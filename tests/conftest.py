"""Shared test fixtures for the location aggregator."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (unit tests never reach AWS)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def details_payload():
    return {
        "location_id": "12345",
        "name": "Petronas Twin Towers",
        "address_obj": {"city": "Kuala Lumpur", "country": "Malaysia"},
        "rating": "4.5",
        "num_reviews": "21034",
    }


@pytest.fixture
def photos_payload():
    return {
        "data": [
            {"id": 1, "caption": "Towers at night", "images": {"small": {"url": "https://img.test/1.jpg"}}},
            {"id": 2, "caption": "Skybridge", "images": {"small": {"url": "https://img.test/2.jpg"}}},
        ],
        "paging": {"results": 2, "total_results": 40, "skipped": 0},
    }


@pytest.fixture
def reviews_payload():
    return {
        "data": [
            {"id": 900, "rating": 5, "title": "Iconic", "text": "Worth the queue.", "lang": "en"},
        ],
        "paging": {"results": 1, "total_results": 21034, "skipped": 0},
    }
