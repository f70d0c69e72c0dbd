import numbers

import numpy


def squared_error(output, target):
    """ Sum of squared differences between a single output and target
    """
    output = numpy.asarray(output, dtype=float)
    target = numpy.asarray(target, dtype=float)

    if output.ndim != 1 or output.shape != target.shape:
        msg = "`output` (shape {}) and `target` (shape {}) should be 1d " \
              "arrays of the same length"
        raise ValueError(msg.format(output.shape, target.shape))

    diff = output - target
    return float(numpy.dot(diff, diff))


def _validate_rows(outputs, targets):
    outputs = numpy.atleast_2d(numpy.asarray(outputs, dtype=float))
    targets = numpy.atleast_2d(numpy.asarray(targets, dtype=float))

    if outputs.shape != targets.shape:
        msg = "Mismatch in shapes: outputs {}, targets {}"
        raise ValueError(msg.format(outputs.shape, targets.shape))

    if outputs.shape[0] == 0:
        raise ValueError("No examples were provided")

    return outputs, targets


def mean_squared_error(outputs, targets):
    """ Mean over examples (rows) of the per-example squared error
    """
    outputs, targets = _validate_rows(outputs, targets)
    return float(((outputs - targets)**2).sum(axis=1).mean())


def argmax_accuracy(outputs, targets):
    """ Fraction of examples (rows) where the largest output and the
    largest target occur at the same index
    """
    outputs, targets = _validate_rows(outputs, targets)
    agree = outputs.argmax(axis=1) == targets.argmax(axis=1)
    return float(agree.mean())


def one_hot(label, n_classes, low=0.01, high=0.99):
    """ Build a target vector of length `n_classes` that is `high` at index
    `label` and `low` elsewhere

    Note
    ----
    The defaults keep targets inside the open interval (0, 1), which the
    sigmoid output layer can approach but never reach.
    """
    if (not isinstance(label, numbers.Integral) or
            isinstance(label, bool)):
        msg = "`label` ({}) must be an integer"
        raise ValueError(msg.format(label))

    if not 0 <= label < n_classes:
        msg = "`label` ({}) out of range for {} classes"
        raise ValueError(msg.format(label, n_classes))

    target = numpy.full(n_classes, low, dtype=float)
    target[label] = high
    return target
