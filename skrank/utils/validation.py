# Functions to validate data matrices, label vectors and method names.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import numpy as np
from ..exceptions import InvalidInput, InvalidLabels, UnknownMethod


def check_data(X, name='data'):
    """ Checks a data matrix and returns it as a 2D float array.

    Vectors are treated as a single column (one variable). The returned
    array is always a copy, so callers are free to modify it.

    Parameters
    ----------
    X : array-like
        Matrix of shape = [n_samples, n_features] or vector of
        shape = [n_samples].
    name : str
        Name of the argument, used in error messages.

    Returns
    -------
    X : ndarray
        Float array of shape = [n_samples, n_features].

    Raises
    ------
    InvalidInput
        If X is None, empty, non-numeric or has more than two dimensions.
    """

    if X is None:
        raise InvalidInput('Please provide a %s matrix to work with' % name)

    try:
        X = np.array(X, dtype=float)
    except (TypeError, ValueError):
        raise InvalidInput('The %s matrix should only contain numbers' % name)

    if X.ndim == 1:
        X = X[:, np.newaxis]

    if X.ndim != 2:
        raise InvalidInput('The %s matrix should be 1D or 2D, not %iD'
                           % (name, X.ndim))

    if X.size == 0:
        raise InvalidInput('The %s matrix is empty' % name)

    return X


def check_labels(y, n_samples):
    """ Checks that y is a vector of 0s and 1s with both classes present.

    Parameters
    ----------
    y : array-like
        Class labels of shape = [n_samples].
    n_samples : int
        Number of rows in the data matrix the labels belong to.

    Returns
    -------
    y : ndarray
        Integer array of shape = [n_samples].

    Raises
    ------
    InvalidLabels
        If labels are missing, of the wrong length, do not contain exactly
        two distinct values, or contain values other than 0 and 1.
    """

    if y is None:
        raise InvalidLabels('Please provide a vector of class labels having '
                            '0s and 1s')

    y = np.asarray(y).ravel()
    if y.size == 0:
        raise InvalidLabels('Please provide a vector of class labels having '
                            '0s and 1s')

    if y.size != n_samples:
        raise InvalidLabels('Mismatch between number of samples (%i) and '
                            'number of class labels (%i)'
                            % (n_samples, y.size))

    uq_vals = np.unique(y)
    if uq_vals.size != 2:
        raise InvalidLabels('Found %i distinct class labels; exactly two '
                            'classes are supported' % uq_vals.size)

    if not np.all(np.isin(uq_vals, [0, 1])):
        raise InvalidLabels('Classes should be a vector of 0s and 1s, got %r'
                            % uq_vals.tolist())

    return y.astype(int)


def check_method(method, options, name='method', aliases=None):
    """ Normalizes a method name and checks it against allowed options.

    Parameters
    ----------
    method : str
        Method name (case-insensitive).
    options : sequence of str
        Allowed (lowercase) method names.
    name : str
        Name of the argument, used in error messages.
    aliases : dict, optional
        Maps alternative spellings onto entries in ``options``.

    Returns
    -------
    method : str
        Lowercase, de-aliased method name.

    Raises
    ------
    UnknownMethod
        If method is not a string or not one of the options.
    """

    if not isinstance(method, str):
        raise UnknownMethod('%s should be a string, not %r' % (name, method))

    method = method.lower()
    if aliases is not None:
        method = aliases.get(method, method)

    if method not in options:
        raise UnknownMethod('Incorrect %s specified: %s; should be one of %s'
                            % (name, method, ', '.join(options)))

    return method
