import os
import shutil
import tempfile
import unittest

from ffnn.core.logger import CoreLogger
from ffnn.network.feedforward_network import FeedforwardNetwork


class TestCoreLogger(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.filename = os.path.join(self.tmp_dir, 'log.txt')

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_progress_written_to_file(self):
        logger = CoreLogger(filename=self.filename, stdout=False)
        logger.progress("Epoch complete", 3, 120)
        logger.close()

        with open(self.filename) as f:
            contents = f.read()

        self.assertIn("INFO", contents)
        self.assertIn("(003 / 120) Epoch complete", contents)

    def test_network_summary(self):
        logger = CoreLogger(filename=self.filename, stdout=False)
        network = FeedforwardNetwork(784, 100, 10, 0.3, random_state=0)
        logger.network_summary(network, n_examples=60000, n_epochs=5)
        logger.close()

        with open(self.filename) as f:
            contents = f.read()

        self.assertIn("Training network 784-100-10 (learning rate 0.3) on "
                      "60000 examples for 5 epoch(s)", contents)

    def test_close_detaches_handlers(self):
        logger = CoreLogger(filename=self.filename, stdout=True)
        self.assertEqual(len(logger.handlers), 2)

        logger.close()
        self.assertEqual(len(logger.handlers), 0)


if __name__ == '__main__':
    unittest.main()
