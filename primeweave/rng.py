"""ChaCha20-backed random source.

ChaChaRandom(seed) draws from a ChaCha20 keystream. With no seed the key is
taken from os.urandom, otherwise it is derived from the seed so tests can
replay the exact same witnesses and coefficients.
"""

import os
import random
import threading
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from cryptography.hazmat.backends import default_backend

KEY_SIZE = 32
NONCE = bytes(16)
BPF = 53  # bits in a float mantissa


def derive_key(seed) -> bytes:
    """Stretch an int, str or bytes seed into a ChaCha20 key."""
    if isinstance(seed, int):
        seed = seed.to_bytes((seed.bit_length() + 8) // 8, 'big', signed=True)
    elif isinstance(seed, str):
        seed = seed.encode('utf-8')
    elif not isinstance(seed, (bytes, bytearray)):
        raise TypeError(f"Unsupported seed type: {type(seed).__name__}")
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(bytes(seed))
    return digest.finalize()


class ChaChaRandom(random.Random):
    """random.Random whose bits come from a ChaCha20 keystream."""

    def __init__(self, seed=None):
        self._lock = threading.Lock()
        super().__init__(seed)

    def seed(self, a=None, version=2):
        key = os.urandom(KEY_SIZE) if a is None else derive_key(a)
        cipher = Cipher(algorithms.ChaCha20(key, NONCE), mode=None, backend=default_backend())
        with self._lock:
            self._stream = cipher.encryptor()

    def _keystream(self, n: int) -> bytes:
        with self._lock:
            return self._stream.update(bytes(n))

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        numbytes = (k + 7) // 8
        x = int.from_bytes(self._keystream(numbytes), 'big')
        return x >> (numbytes * 8 - k)

    def random(self) -> float:
        return (int.from_bytes(self._keystream(7), 'big') >> 3) * 2.0 ** -BPF

    def randbytes(self, n: int) -> bytes:
        return self._keystream(n)

    def getstate(self):
        raise NotImplementedError("ChaChaRandom state cannot be exported; reseed instead")

    def setstate(self, state):
        raise NotImplementedError("ChaChaRandom state cannot be imported; reseed instead")
