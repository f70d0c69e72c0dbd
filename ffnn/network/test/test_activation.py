import unittest

import numpy as np

from ffnn.network.activation import (
    sigmoid, sigmoid_derivative_from_output)


class TestActivation(unittest.TestCase):

    def test_sigmoid_zero(self):
        self.assertEqual(sigmoid(0.0), 0.5)

    def test_sigmoid_matches_logistic(self):
        x = np.linspace(-10, 10, 101)
        expected = 1 / (1 + np.exp(-x))
        self.assertLess(np.abs(sigmoid(x) - expected).max(), 1e-12)

    def test_sigmoid_saturates(self):
        y = sigmoid(np.array([-1000.0, 1000.0]))
        self.assertEqual(y[0], 0.0)
        self.assertEqual(y[1], 1.0)

    def test_derivative_from_output(self):
        x = np.linspace(-5, 5, 41)
        h = 1e-6
        numeric = (sigmoid(x + h) - sigmoid(x - h)) / (2 * h)
        analytic = sigmoid_derivative_from_output(sigmoid(x))
        self.assertLess(np.abs(numeric - analytic).max(), 1e-8)


if __name__ == '__main__':
    unittest.main()
