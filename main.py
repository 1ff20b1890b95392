# ----- main.py -----
import sys
from tabulate import tabulate
from primeweave.crypto import generate_large_prime
from primeweave.rng import ChaChaRandom
from shamir import split_shares, inspect_share_primality, verify_reconstruction
from primeweave import config

# --- Helper Functions ---
def print_header(title):
    print("\n" + "="*50)
    print(f"{title}")
    print("="*50)

def print_backend(message):
    print(f"\n[ENGINE LOG]... {message}")


def run(secret_bits=config.Config.SECRET_BITS,
        modulus_bits=config.Config.MODULUS_BITS,
        threshold=config.Config.THRESHOLD,
        shares_count=config.Config.SHARES_COUNT,
        rng=None):
    """
    Generate a prime secret, split it, and check that the first `threshold`
    shares reconstruct it. Returns the ReconstructionResult of that check.
    """
    if rng is None:
        rng = ChaChaRandom()

    print_backend(f"Generating {secret_bits}-bit secret prime")
    secret = generate_large_prime(secret_bits, rng=rng)

    # Use a modulus significantly larger than the secret to avoid wrap-around
    print_backend(f"Generating {modulus_bits}-bit prime modulus")
    modulus = generate_large_prime(modulus_bits, rng=rng)

    shares = split_shares(secret, threshold, shares_count, modulus, rng=rng)
    print_backend(f"Secret split into {len(shares)} shares, threshold {threshold}")

    print_header("Original Secret (Prime)")
    print(secret)

    print_header("Shares")
    for x, y in shares:
        print(f"x: {x}, y: {y}")

    # Share values are expected NOT to be prime
    verdicts = inspect_share_primality(shares, rng=rng)
    print_header("Share Primality")
    print(tabulate(
        [(x, "prime" if is_prime else "NOT prime") for x, is_prime in verdicts],
        headers=["x", "verdict"],
    ))

    # Select the first `threshold` shares for reconstruction
    result = verify_reconstruction(secret, shares[:threshold], modulus)

    print_header("Reconstructed Secret")
    print(result.value if result.value is not None else "<unavailable>")

    if result.ok:
        print("\nReconstruction successful. The secret matches exactly.")
    else:
        print(f"\nRECOVERY FAILED: {result.error}")
    return result


def main():
    print_header("PrimeWeave Threshold Secret Sharing")
    result = run()
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
