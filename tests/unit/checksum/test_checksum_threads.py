from concurrent.futures import ThreadPoolExecutor
import random

import numpy as np

from checksum_engine import catalog
from checksum_engine.checksum import Checksum


def _buffers(n: int):
    rng = random.Random(42)
    return [bytes(rng.getrandbits(8) for _ in range(rng.randrange(0, 2048))) for _ in range(n)]


def test_shared_algorithm_across_threads_matches_sequential():
    bufs = _buffers(64)
    for alg in (catalog.XOR, catalog.CRC8, catalog.CRC16, catalog.CRC32):
        c = Checksum(alg)
        sequential = [c.calculate(b) for b in bufs]
        with ThreadPoolExecutor(max_workers=8) as ex:
            threaded = list(ex.map(c.calculate, bufs))
        assert threaded == sequential


def test_shared_algorithm_across_threads_scalar_sequences():
    rng = np.random.default_rng(7)
    arrays = [rng.integers(0, 2**32, size=rng.integers(0, 256), dtype=np.uint32) for _ in range(32)]
    c = Checksum(catalog.CRC32)
    sequential = [c.calculate_values(a) for a in arrays]
    with ThreadPoolExecutor(max_workers=8) as ex:
        threaded = list(ex.map(c.calculate_values, arrays))
    assert threaded == sequential
