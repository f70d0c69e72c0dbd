import unittest

import numpy as np

from ffnn.network.initialization import (
    fan_out_std, get_random_state, normal_weights)


class TestInitialization(unittest.TestCase):

    def test_fan_out_std(self):
        self.assertEqual(fan_out_std(4), 0.5)
        self.assertEqual(fan_out_std(1), 1.0)

        with self.assertRaises(ValueError):
            fan_out_std(0)

    def test_get_random_state(self):
        random_state = np.random.RandomState(5)
        self.assertIs(get_random_state(random_state), random_state)
        self.assertIsInstance(get_random_state(None), np.random.RandomState)

        # An int seed gives the same stream as an explicit RandomState
        self.assertEqual(get_random_state(5).rand(),
                         np.random.RandomState(5).rand())

        for bad in ['5', 1.5, True]:
            with self.assertRaises(TypeError):
                get_random_state(bad)

    def test_normal_weights_row_major(self):
        weights = normal_weights(3, 4, 2.0, np.random.RandomState(11))

        draws = np.random.RandomState(11)
        expected = np.array(
            [[2.0 * draws.standard_normal() for _ in range(4)]
             for _ in range(3)])

        self.assertEqual(weights.shape, (3, 4))
        self.assertLess(np.abs(weights - expected).max(), 1e-12)


if __name__ == '__main__':
    unittest.main()
