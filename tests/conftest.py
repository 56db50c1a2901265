from __future__ import annotations

import pytest

from tests.helpers import Spy


@pytest.fixture
def spy() -> Spy:
    return Spy()
