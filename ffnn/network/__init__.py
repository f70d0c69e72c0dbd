# flake8: noqa

from .activation import sigmoid, sigmoid_derivative_from_output
from .feedforward_network import FeedforwardNetwork, NetworkShape
