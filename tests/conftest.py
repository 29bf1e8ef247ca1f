from __future__ import annotations

import random
from typing import List

import pytest


@pytest.fixture
def check_input() -> bytes:
    """
    Standard CRC catalogue check string.
    """
    return b"123456789"


@pytest.fixture
def random_buffers() -> List[bytes]:
    """
    Deterministic pseudo-random buffers of assorted lengths (including empty).
    """
    rng = random.Random(0xC0FFEE)
    out = [b""]
    for _ in range(31):
        n = rng.randrange(1, 300)
        out.append(bytes(rng.getrandbits(8) for _ in range(n)))
    return out
