"""PrimeWeave: threshold secret sharing over a prime field."""

from primeweave.entities import (
    Share,
    PrimeWeaveError,
    ShareConfigurationError,
    ReconstructionError,
    SecretMismatchError,
    ReconstructionResult,
)
from primeweave.crypto import is_probably_prime, generate_large_prime
from primeweave.rng import ChaChaRandom
