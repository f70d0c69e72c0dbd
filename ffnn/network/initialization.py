import numbers

import numpy


def get_random_state(random_state=None):
    """ Returns a :class:`numpy.random.RandomState` from `random_state`

    Parameters
    ----------
    random_state: None, int, or numpy.random.RandomState, default=None
        If None, a fresh unseeded random state is created. If an int, it is
        used as the seed of a new random state. A random state instance is
        returned unchanged (it is shared, not copied).

    """
    if random_state is None:
        return numpy.random.RandomState()

    if isinstance(random_state, numpy.random.RandomState):
        return random_state

    if (isinstance(random_state, numbers.Integral) and
            not isinstance(random_state, bool)):
        return numpy.random.RandomState(random_state)

    msg = "`random_state` ({}) was not None, an int, or a RandomState"
    raise TypeError(msg.format(type(random_state).__name__))


def fan_out_std(n_nodes):
    """ Standard deviation `1 / sqrt(n_nodes)` used to scale the initial
    weights feeding a layer of width `n_nodes`
    """
    if n_nodes <= 0:
        msg = "Layer width ({}) must be positive"
        raise ValueError(msg.format(n_nodes))

    return 1.0 / numpy.sqrt(n_nodes)


def normal_weights(n_rows, n_cols, std, random_state):
    """ Sample a dense weight matrix of independent zero-mean normal entries

    Parameters
    ----------
    n_rows, n_cols: int
        The shape of the returned matrix

    std: float
        The standard deviation of each entry

    random_state: numpy.random.RandomState
        The source of the draws. Entries are drawn in row-major order, so
        the same seed always produces the same matrix.

    Returns
    -------
    weights: ndarray, shape=(n_rows, n_cols)

    """
    return random_state.normal(loc=0.0, scale=std, size=(n_rows, n_cols))
