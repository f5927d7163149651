# Error hierarchy shared by all subpackages.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD


class SkrankError(ValueError):
    """ Base class for errors raised on invalid input to skrank. """
    pass


class InvalidInput(SkrankError):
    """ Raised when a data or rank matrix is missing, empty or malformed. """
    pass


class InvalidLabels(SkrankError):
    """ Raised when class labels are not a binary vector of 0s and 1s. """
    pass


class UnknownMethod(SkrankError):
    """ Raised when a method name is not one of the supported options. """
    pass


class InvalidThreshold(SkrankError):
    """ Raised when an outlier threshold has the wrong number of values. """
    pass
