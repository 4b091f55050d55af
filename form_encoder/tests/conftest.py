import pytest

from form_encoder.encoder import Encoder


@pytest.fixture
def encoder():
    return Encoder()
