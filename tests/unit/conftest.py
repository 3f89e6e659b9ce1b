import pytest

from tests.unit.call_test_helpers import RecordingConnection


@pytest.fixture
def connection() -> RecordingConnection:
    """Connection double whose calls return nothing."""
    return RecordingConnection()
