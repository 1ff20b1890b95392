import unittest
from primeweave.rng import ChaChaRandom, derive_key


class ChaChaRandomTest(unittest.TestCase):
    def test_same_seed_same_stream(self):
        a, b = ChaChaRandom(1234), ChaChaRandom(1234)
        self.assertEqual([a.getrandbits(512) for _ in range(4)],
                         [b.getrandbits(512) for _ in range(4)])

    def test_different_seeds_differ(self):
        self.assertNotEqual(ChaChaRandom(1).getrandbits(256), ChaChaRandom(2).getrandbits(256))

    def test_unseeded_instances_differ(self):
        self.assertNotEqual(ChaChaRandom().getrandbits(256), ChaChaRandom().getrandbits(256))

    def test_getrandbits_bounds(self):
        rng = ChaChaRandom(5)
        self.assertEqual(rng.getrandbits(0), 0)
        for k in (1, 7, 8, 9, 1024):
            for _ in range(20):
                self.assertLess(rng.getrandbits(k), 1 << k)
        with self.assertRaises(ValueError):
            rng.getrandbits(-1)

    def test_randrange_range(self):
        rng = ChaChaRandom(6)
        n = 2**127 - 1
        for _ in range(50):
            self.assertTrue(2 <= rng.randrange(2, n) < n)

    def test_random_float(self):
        rng = ChaChaRandom(7)
        for _ in range(50):
            self.assertTrue(0.0 <= rng.random() < 1.0)

    def test_reseed(self):
        rng = ChaChaRandom(9)
        first = rng.getrandbits(64)
        rng.seed(9)
        self.assertEqual(rng.getrandbits(64), first)

    def test_state_not_exportable(self):
        with self.assertRaises(NotImplementedError):
            ChaChaRandom(1).getstate()

    def test_seed_types(self):
        self.assertEqual(len(derive_key(1)), 32)
        self.assertEqual(derive_key("abc"), derive_key(b"abc"))
        with self.assertRaises(TypeError):
            derive_key(1.5)


if __name__ == '__main__':
    unittest.main()
