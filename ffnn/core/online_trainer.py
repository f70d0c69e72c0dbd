from collections import namedtuple
import logging

import numpy

from ffnn.network.initialization import get_random_state
from ffnn.score_functions import argmax_accuracy, mean_squared_error


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


EvaluationResult = namedtuple(
    'EvaluationResult', ['mean_squared_error', 'accuracy'])


def _validate_examples(inputs, targets):
    inputs = numpy.asarray(inputs, dtype=float)
    targets = numpy.asarray(targets, dtype=float)

    if inputs.ndim != 2 or targets.ndim != 2:
        msg = ("`inputs` and `targets` should be 2d arrays with one example "
               "per row (got ndim {} and {})")
        raise ValueError(msg.format(inputs.ndim, targets.ndim))

    if inputs.shape[0] != targets.shape[0]:
        msg = "Mismatch in number of examples: inputs ({}), targets ({})"
        raise ValueError(msg.format(inputs.shape[0], targets.shape[0]))

    if inputs.shape[0] == 0:
        raise ValueError("No training examples were provided")

    return inputs, targets


def evaluate(network, inputs, targets):
    """ Query the network on every example and score the results

    Parameters
    ----------
    network: FeedforwardNetwork
        The network to evaluate; it is not modified.

    inputs: ndarray, shape=(n_examples, n_input)

    targets: ndarray, shape=(n_examples, n_output)

    Returns
    -------
    result: EvaluationResult
        The mean squared error and the argmax classification accuracy.

    """
    inputs, targets = _validate_examples(inputs, targets)
    outputs = numpy.array([network.query(x) for x in inputs])

    return EvaluationResult(
        mean_squared_error=mean_squared_error(outputs, targets),
        accuracy=argmax_accuracy(outputs, targets))


def train_online(network, inputs, targets, n_epochs=1, shuffle=False,
                 random_state=None, run_logger=None, log_every=None):
    """ Train `network` one example at a time for `n_epochs` passes
    over the data

    Parameters
    ----------
    network: FeedforwardNetwork
        The network to train (updated in place).

    inputs: ndarray, shape=(n_examples, n_input)
        Training inputs, one example per row.

    targets: ndarray, shape=(n_examples, n_output)
        The respective training targets.

    n_epochs: int, default=1
        Number of passes over the examples.

    shuffle: bool, default=False
        If True, each epoch visits the examples in a random order drawn
        from `random_state`. Otherwise examples are visited in row order.

    random_state: None, int, or numpy.random.RandomState, default=None
        Only used when `shuffle` is True.

    run_logger: CoreLogger, default=None
        If given, the run configuration and progress are reported with
        :code:`run_logger.network_summary` and :code:`run_logger.progress`.
        Otherwise progress goes to this module's logger at DEBUG level.

    log_every: int, default=None
        Report progress every `log_every` examples within an epoch. If None,
        only the per-epoch summaries are reported.

    Returns
    -------
    epoch_errors: list of float
        The mean squared error over all examples, measured after each epoch.

    """
    inputs, targets = _validate_examples(inputs, targets)

    if n_epochs < 1:
        msg = "`n_epochs` ({}) must be at least 1"
        raise ValueError(msg.format(n_epochs))

    if log_every is not None and log_every < 1:
        msg = "`log_every` ({}) must be at least 1"
        raise ValueError(msg.format(log_every))

    n_examples = inputs.shape[0]
    random_state = get_random_state(random_state) if shuffle else None

    if run_logger is not None:
        run_logger.network_summary(network, n_examples, n_epochs)

    epoch_errors = []

    for epoch in range(n_epochs):

        if shuffle:
            order = random_state.permutation(n_examples)
        else:
            order = numpy.arange(n_examples)

        for i, index in enumerate(order):
            network.train(inputs[index], targets[index])

            if log_every is not None and (i+1) % log_every == 0:
                _report("Trained example in epoch {}".format(epoch+1),
                        i+1, n_examples, run_logger)

        result = evaluate(network, inputs, targets)
        epoch_errors.append(result.mean_squared_error)

        msg = "Epoch complete; mse: {:.6f}, accuracy: {:.4f}".format(
            result.mean_squared_error, result.accuracy)
        _report(msg, epoch+1, n_epochs, run_logger)

    return epoch_errors


def _report(msg, i, n, run_logger):
    if run_logger is None:
        logger.debug("({} / {}) {}".format(i, n, msg))
    else:
        run_logger.progress(msg, i, n)
