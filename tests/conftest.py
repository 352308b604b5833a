import pytest

from debug import Debug


@pytest.fixture(autouse=True)
def quiet_debug():
    Debug().reset()
    yield
    Debug().reset()
