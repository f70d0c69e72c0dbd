"""
A fully connected feedforward network with a single hidden layer
and sigmoid activations on both the hidden and output layers.

Input (R^n) => Hidden (R^h) => Output (R^m)

The network is trained online: each call to `train` performs one
backpropagation step from a single labelled example. Layer widths are
fixed when the network is constructed and never change.
"""
from collections import namedtuple
import logging
import numbers
import threading

import numpy

from ffnn.core.exception import ShapeMismatchError
from ffnn.network.activation import (
    sigmoid, sigmoid_derivative_from_output)
from ffnn.network.initialization import (
    fan_out_std, get_random_state, normal_weights)


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


NetworkShape = namedtuple(
    'NetworkShape', ['n_input', 'n_hidden', 'n_output'])


class FeedforwardNetwork:
    """ Single hidden layer network trained by per-example backpropagation.

    params: input_weights, where input_weights[i, j] = weight from input j
                to hidden unit i.
            output_weights, where output_weights[i, j] = weight from hidden
                unit j to output unit i.

    For a single vector input, the computation chain is:
    hidden = sigmoid( dot(input_weights, input) )
    output = sigmoid( dot(output_weights, hidden) )

    Note
    ----
    A network instance cannot be copied or pickled. Calls on one instance
    are serialized by an internal lock, so `query` never observes a
    partially applied `train` update.
    """

    def __init__(self, n_input, n_hidden, n_output, learning_rate,
                 random_state=None):
        """
        Parameters
        ----------
        n_input: int
            Number of input units.

        n_hidden: int
            Number of hidden units.

        n_output: int
            Number of output units.

        learning_rate: float
            The step size multiplying every weight update in `train`.

        random_state: None, int, or numpy.random.RandomState, default=None
            Source of the initial weights. Provide a seed or RandomState
            object for reproducible results.
        """
        for name, width in (('n_input', n_input),
                            ('n_hidden', n_hidden),
                            ('n_output', n_output)):
            if (not isinstance(width, numbers.Integral) or
                    isinstance(width, bool) or width <= 0):
                msg = "`{}` ({}) must be a positive integer"
                raise ValueError(msg.format(name, width))

        if (not isinstance(learning_rate, numbers.Real) or
                not numpy.isfinite(learning_rate) or learning_rate <= 0):
            msg = "`learning_rate` ({}) must be a positive finite number"
            raise ValueError(msg.format(learning_rate))

        self._shape = NetworkShape(int(n_input), int(n_hidden), int(n_output))
        self._learning_rate = float(learning_rate)
        self._lock = threading.Lock()

        random_state = get_random_state(random_state)

        # The input weights are drawn before the output weights.
        self._input_weights = normal_weights(
            n_rows=self._shape.n_hidden, n_cols=self._shape.n_input,
            std=fan_out_std(self._shape.n_hidden),
            random_state=random_state)
        self._output_weights = normal_weights(
            n_rows=self._shape.n_output, n_cols=self._shape.n_hidden,
            std=fan_out_std(self._shape.n_output),
            random_state=random_state)

        logger.debug("Initialized {!r} with learning rate {}".format(
            self, self._learning_rate))

    def __repr__(self):
        return "<FeedforwardNetwork n_input=%d, n_hidden=%d, n_output=%d>" % (
            self._shape)

    def __copy__(self):
        msg = "{} instances cannot be copied"
        raise TypeError(msg.format(self.__class__.__name__))

    def __deepcopy__(self, memo):
        return self.__copy__()

    def __reduce_ex__(self, protocol):
        msg = "{} instances cannot be pickled"
        raise TypeError(msg.format(self.__class__.__name__))

    @property
    def shape(self):
        return self._shape

    @property
    def learning_rate(self):
        return self._learning_rate

    @property
    def input_weights(self):
        """ Read-only view of the input => hidden weights,
        shape=(n_hidden, n_input)
        """
        return self._read_only(self._input_weights)

    @property
    def output_weights(self):
        """ Read-only view of the hidden => output weights,
        shape=(n_output, n_hidden)
        """
        return self._read_only(self._output_weights)

    @staticmethod
    def _read_only(arr):
        view = arr.view()
        view.flags.writeable = False
        return view

    def set_weights(self, input_weights, output_weights):
        """ Replace both weight matrices with copies of the given arrays

        Parameters
        ----------
        input_weights: array-like, shape=(n_hidden, n_input)

        output_weights: array-like, shape=(n_output, n_hidden)

        """
        input_weights = numpy.array(input_weights, dtype=float)
        output_weights = numpy.array(output_weights, dtype=float)

        expected = (self._shape.n_hidden, self._shape.n_input)
        if input_weights.shape != expected:
            msg = "`input_weights` was shape {} but should be {}"
            raise ShapeMismatchError(msg.format(input_weights.shape, expected))

        expected = (self._shape.n_output, self._shape.n_hidden)
        if output_weights.shape != expected:
            msg = "`output_weights` was shape {} but should be {}"
            raise ShapeMismatchError(msg.format(output_weights.shape, expected))

        with self._lock:
            self._input_weights = input_weights
            self._output_weights = output_weights

    def _validate_vector(self, values, size, name):
        values = numpy.asarray(values, dtype=float)
        if values.ndim != 1 or values.shape[0] != size:
            msg = "`{}` was shape {} but should be ({},)"
            raise ShapeMismatchError(msg.format(name, values.shape, size))
        return values

    def _forward(self, inputs):
        """ Returns the hidden and output activations for `inputs`
        """
        hidden = sigmoid(numpy.dot(self._input_weights, inputs))
        output = sigmoid(numpy.dot(self._output_weights, hidden))
        return hidden, output

    def query(self, inputs):
        """
        Parameters
        ----------
        inputs: array-like, shape=(n_input,)
            A single input vector.

        Returns
        -------
        output: ndarray, shape=(n_output,)
            The output layer activations, each in (0, 1).
        """
        inputs = self._validate_vector(
            inputs, self._shape.n_input, 'inputs')

        with self._lock:
            _, output = self._forward(inputs)

        return output

    def train(self, inputs, targets):
        """ Perform one backpropagation step from a single example

        Parameters
        ----------
        inputs: array-like, shape=(n_input,)
            A single input vector.

        targets: array-like, shape=(n_output,)
            The desired output, conventionally in (0, 1). Targets are not
            range checked; out-of-range targets simply produce larger
            updates.

        Note
        ----
        A learning rate that is too large, or unbounded inputs, can drive
        the weights to inf or nan. This is not detected.
        """
        inputs = self._validate_vector(
            inputs, self._shape.n_input, 'inputs')
        targets = self._validate_vector(
            targets, self._shape.n_output, 'targets')

        with self._lock:
            hidden, output = self._forward(inputs)

            output_error = targets - output

            # Must use the output weights prior to their update below.
            hidden_error = numpy.dot(self._output_weights.T, output_error)

            output_delta = output_error * sigmoid_derivative_from_output(
                output)
            self._output_weights += self._learning_rate * numpy.outer(
                output_delta, hidden)

            hidden_delta = hidden_error * sigmoid_derivative_from_output(
                hidden)
            self._input_weights += self._learning_rate * numpy.outer(
                hidden_delta, inputs)
