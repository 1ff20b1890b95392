from primeweave.rng import ChaChaRandom
from primeweave import config


def is_probably_prime(n: int, rounds: int = config.Config.PRIMALITY_ROUNDS, rng=None) -> bool:
    """Miller-Rabin test; a composite slips through with probability <= 4^-rounds"""
    if rounds < 1:
        raise ValueError("Primality test needs at least one round")
    if n <= 1:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0:
        return False

    if rng is None:
        rng = ChaChaRandom()
    n_minus_one = n - 1

    # Write n-1 as 2^s * d
    d = n_minus_one
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = rng.randrange(2, n_minus_one)  # witness in [2, n-1)
        x = pow(a, d, n)
        if x == 1 or x == n_minus_one:
            continue

        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n_minus_one:
                break
        else:
            return False  # Composite

    return True


def generate_large_prime(bits: int, rounds: int = config.Config.PRIMALITY_ROUNDS,
                         rng=None, exact_bits: bool = False) -> int:
    """
    Draw random odd candidates of `bits` bits until one passes Miller-Rabin.

    Only the low bit is forced by default, so the result can come out a few
    bits shorter than requested. Pass exact_bits=True to also force the top
    bit.
    """
    if bits < 2:
        raise ValueError("Prime size must be at least 2 bits")
    if rng is None:
        rng = ChaChaRandom()

    top_bit = 1 << (bits - 1) if exact_bits else 0
    while True:
        candidate = rng.getrandbits(bits) | top_bit | 1  # Ensure it's odd
        if is_probably_prime(candidate, rounds, rng):
            return candidate
