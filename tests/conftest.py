import httpx
import pytest

from pitch_mix.data.statsapi import StatsApiClient

from fakes import fake_statsapi


@pytest.fixture
def fake_client():
    return StatsApiClient(transport=httpx.MockTransport(fake_statsapi))
