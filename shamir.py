from primeweave.crypto import is_probably_prime
from primeweave.entities import (
    Share,
    ShareConfigurationError,
    ReconstructionError,
    SecretMismatchError,
    ReconstructionResult,
)
from primeweave.rng import ChaChaRandom
from primeweave import config


def _evaluate_polynomial(coefficients: list, x: int, modulus: int) -> int:
    """Evaluate sum(c_i * x^i) mod modulus term by term"""
    y = 0
    for i, coefficient in enumerate(coefficients):
        y = (y + coefficient * pow(x, i, modulus)) % modulus
    return y


def split_shares(secret: int, threshold: int, shares_count: int, modulus: int,
                 rng=None, check_modulus: bool = False) -> list:
    """
    Split `secret` into `shares_count` shares, any `threshold` of which
    recover it.

    `modulus` must be prime. That is the caller's responsibility and is only
    re-checked when `check_modulus` is set. Every parameter is validated
    before a single coefficient is drawn.
    """
    if threshold <= 1:
        raise ShareConfigurationError("Threshold must be at least 2")
    if shares_count < threshold:
        raise ShareConfigurationError("Number of shares must be >= threshold")
    if modulus <= shares_count:
        raise ShareConfigurationError("Modulus must exceed the number of shares")
    if not 0 <= secret < modulus:
        raise ShareConfigurationError("Secret is too large for the chosen prime")
    if check_modulus and not is_probably_prime(modulus, rng=rng):
        raise ShareConfigurationError("Modulus is not prime")

    if rng is None:
        rng = ChaChaRandom()

    # The secret is the constant term, degree = threshold - 1
    coefficients = [secret] + [rng.randrange(modulus) for _ in range(threshold - 1)]

    return [
        Share(x, _evaluate_polynomial(coefficients, x, modulus))
        for x in range(1, shares_count + 1)
    ]


def reconstruct_secret(shares, modulus: int) -> int:
    """Recover the constant term by Lagrange interpolation at x = 0"""
    if not shares:
        raise ReconstructionError("Cannot reconstruct secret from zero shares.")
    if modulus < 2:
        raise ReconstructionError("Modulus must be a prime >= 2")

    secret = 0
    for i, (xi, yi) in enumerate(shares):
        numerator = 1
        denominator = 1
        for j, (xj, _) in enumerate(shares):
            if i == j:
                continue
            # (xj - xi) mod modulus, kept non-negative
            diff = (xj + modulus - xi) % modulus
            numerator = (numerator * xj) % modulus
            denominator = (denominator * diff) % modulus

        if denominator == 0:
            raise ReconstructionError(
                f"Share at x = {xi} collides with another share modulo the prime"
            )

        # Fermat's little theorem: denominator^(p-2) is the inverse mod p
        inverse = pow(denominator, modulus - 2, modulus)
        if (denominator * inverse) % modulus != 1:
            raise ReconstructionError("Modulus is not prime: denominator has no Fermat inverse")
        lagrange_coeff = (numerator * inverse) % modulus
        secret = (secret + lagrange_coeff * yi) % modulus

    return secret


def inspect_share_primality(shares, rounds: int = config.Config.PRIMALITY_ROUNDS, rng=None) -> list:
    """Report whether each share's y value happens to be prime (diagnostic only)."""
    if rng is None:
        rng = ChaChaRandom()
    return [(x, is_probably_prime(y, rounds, rng)) for x, y in shares]


def verify_reconstruction(secret: int, shares, modulus: int) -> ReconstructionResult:
    """Reconstruct from `shares` and compare against the known secret."""
    try:
        recovered = reconstruct_secret(shares, modulus)
    except ReconstructionError as e:
        return ReconstructionResult.failure(e)

    if recovered != secret:
        return ReconstructionResult.failure(SecretMismatchError(secret, recovered), value=recovered)
    return ReconstructionResult.success(recovered)


class ShamirSecretSharing:
    """Implementation of Shamir's Secret Sharing scheme over a fixed prime"""

    def __init__(self, threshold: int, total_shares: int, prime: int, rng=None):
        self.threshold = threshold
        self.total_shares = total_shares
        self.prime = prime
        self.rng = rng

    def split_secret(self, secret: int) -> list:
        """Split secret into shares"""
        return split_shares(secret, self.threshold, self.total_shares, self.prime, rng=self.rng)

    def recover_secret(self, shares) -> int:
        """Recover secret from shares using Lagrange interpolation"""
        distinct = {x for x, _ in shares}
        if len(distinct) < self.threshold:
            raise ReconstructionError(f"Not enough shares. Need {self.threshold}, got {len(distinct)}")
        return reconstruct_secret(shares, self.prime)
