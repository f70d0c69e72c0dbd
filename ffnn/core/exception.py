class ShapeMismatchError(ValueError):
    """ Raised when a vector or weight matrix does not match the widths
    the network was constructed with
    """
