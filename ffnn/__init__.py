# flake8: noqa

from ._version import version as __version__
from .core.exception import ShapeMismatchError
from .network.feedforward_network import FeedforwardNetwork, NetworkShape
