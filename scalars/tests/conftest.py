# scalars/tests/conftest.py
import pytest

from scalars.services.precision_policy import get_precision, set_precision


@pytest.fixture(autouse=True)
def restore_precision():
    """Keep process-wide precision changes from leaking between tests."""
    saved = get_precision()
    yield
    set_precision(saved)


@pytest.fixture
def precision():
    """Set the process-wide precision for the duration of a test."""
    def _set(n: int) -> None:
        set_precision(n)
    return _set
