import pytest

from fakes import SUCCESS_PAYLOAD


@pytest.fixture
def success_payload():
    return dict(SUCCESS_PAYLOAD)
