from scipy.special import expit


def sigmoid(x):
    """ The logistic function `1 / (1 + exp(-x))`, computed elementwise

    Parameters
    ----------
    x: float or ndarray
        The pre-activation value(s)

    Returns
    -------
    y: float or ndarray
        Values in the open interval (0, 1); same shape as `x`

    """
    return expit(x)


def sigmoid_derivative_from_output(y):
    """ The derivative of the sigmoid expressed in terms of its output,
    i.e., :code:`sigmoid'(x) = y * (1 - y)` where :code:`y = sigmoid(x)`
    """
    return y * (1.0 - y)
