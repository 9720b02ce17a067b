import unittest

import numpy as np

import cachematrix


class TestInvert(unittest.TestCase):
    def test_diagonal(self):
        inv = cachematrix.invert([[2.0, 0.0], [0.0, 2.0]])
        np.testing.assert_allclose(inv, [[0.5, 0.0], [0.0, 0.5]])

    def test_identity(self):
        np.testing.assert_allclose(cachematrix.invert(np.eye(4)), np.eye(4))

    def test_random_well_conditioned(self):
        rng = np.random.default_rng(42)
        n = 16
        a = rng.random((n, n)) + np.eye(n) * n
        inv = cachematrix.invert(a)
        np.testing.assert_allclose(a @ inv, np.eye(n), atol=1e-10)

    def test_integer_input(self):
        inv = cachematrix.invert([[1, 2], [3, 4]])
        np.testing.assert_allclose(inv, [[-2.0, 1.0], [1.5, -0.5]])

    def test_non_square_raises(self):
        with self.assertRaises(np.linalg.LinAlgError):
            cachematrix.invert(np.ones((2, 3)))

    def test_non_two_dimensional_raises(self):
        with self.assertRaises(np.linalg.LinAlgError):
            cachematrix.invert([1.0, 2.0])
        with self.assertRaises(np.linalg.LinAlgError):
            cachematrix.invert(np.ones((2, 2, 2)))

    def test_exactly_singular_raises(self):
        with self.assertRaises(np.linalg.LinAlgError):
            cachematrix.invert([[1.0, 2.0], [2.0, 4.0]])
        with self.assertRaises(np.linalg.LinAlgError):
            cachematrix.invert(np.zeros((3, 3)))

    def test_tolerance_rejects_ill_conditioned(self):
        a = np.array([[1.0, 0.0], [0.0, 1e-6]])
        # rcond is 1e-6: fine at the default tolerance, rejected at a looser one.
        cachematrix.invert(a)
        with self.assertRaisesRegex(np.linalg.LinAlgError, "computationally singular"):
            cachematrix.invert(a, tol=1e-3)

    def test_tolerance_disabled(self):
        a = np.array([[1.0, 0.0], [0.0, 1e-20]])
        with self.assertRaises(np.linalg.LinAlgError):
            cachematrix.invert(a)
        inv = cachematrix.invert(a, tol=None)
        self.assertAlmostEqual(inv[1, 1] / 1e20, 1.0)
        inv0 = cachematrix.invert(a, tol=0)
        self.assertAlmostEqual(inv0[1, 1] / 1e20, 1.0)

    def test_check_finite(self):
        a = np.array([[1.0, np.nan], [0.0, 1.0]])
        with self.assertRaises(ValueError):
            cachematrix.invert(a)

    def test_default_tol_is_machine_epsilon(self):
        self.assertEqual(cachematrix.DEFAULT_TOL, np.finfo(np.float64).eps)


if __name__ == "__main__":
    unittest.main()
