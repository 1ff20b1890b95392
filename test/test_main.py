import io
import unittest
from contextlib import redirect_stdout
from unittest import mock
import main
from primeweave.entities import ReconstructionResult, SecretMismatchError
from primeweave.rng import ChaChaRandom


class DriverTest(unittest.TestCase):
    def test_report(self):
        out = io.StringIO()
        with redirect_stdout(out):
            result = main.run(secret_bits=64, modulus_bits=128, threshold=3,
                              shares_count=5, rng=ChaChaRandom(77))
        report = out.getvalue()
        self.assertTrue(result.ok)
        self.assertIn("Original Secret (Prime)", report)
        self.assertEqual(report.count("x: "), 5)
        self.assertIn(str(result.value), report)
        self.assertIn("Reconstruction successful", report)

    def test_exit_codes(self):
        with redirect_stdout(io.StringIO()):
            with mock.patch.object(main, "run", return_value=ReconstructionResult.success(3)):
                self.assertEqual(main.main(), 0)
            failed = ReconstructionResult.failure(SecretMismatchError(3, 4), value=4)
            with mock.patch.object(main, "run", return_value=failed):
                self.assertEqual(main.main(), 1)


if __name__ == '__main__':
    unittest.main()
