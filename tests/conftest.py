import pytest

SAMPLE_URL = "http://localhost:3000/test/index.php?id=36&a=b#top"


@pytest.fixture
def sample_url():
    """Fixture providing a URL that uses every component except credentials."""
    return SAMPLE_URL
