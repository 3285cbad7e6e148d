from __future__ import annotations

from typing import List

import pytest

from nfib_scraper.scraper.models import ObservationRecord
from tests.fakes import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def chart_rows() -> List[dict]:
    return [
        {"monthyear": "8/1/2025", "indexvalue": 100.8},
        {"monthyear": "9/1/2025", "indexvalue": 98.8},
        {"monthyear": "10/1/2025", "indexvalue": 98.2},
    ]


@pytest.fixture
def sample_series():
    return (
        ObservationRecord("7/1/2025", 100.3),
        ObservationRecord("8/1/2025", 100.8),
        ObservationRecord("9/1/2025", 100.4),
        ObservationRecord("10/1/2025", 98.2),
    )
