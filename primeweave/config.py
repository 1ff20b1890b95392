# Global configuration for the PrimeWeave secret-sharing engine

class Config:
    # Prime sizes
    SECRET_BITS = 512
    MODULUS_BITS = SECRET_BITS * 2  # headroom so the secret never wraps

    # Sharing policy
    THRESHOLD = 6
    SHARES_COUNT = 8

    # Miller-Rabin rounds, false positive <= 4^-rounds
    PRIMALITY_ROUNDS = 10

    # Benchmark parameters
    PERFORMANCE_SAMPLES = 20
    PERFORMANCE_RESULTS = "performance_results.json"

    @classmethod
    def sharing_policy(cls):
        return cls.THRESHOLD, cls.SHARES_COUNT
