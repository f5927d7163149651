# Classes and functions to detect column-wise outliers and to treat them
# by winsorizing (clamping) or trimming (setting to NaN).

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import warnings
import numpy as np
from scipy.special import erfcinv
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from ..exceptions import InvalidInput, InvalidThreshold
from ..utils.validation import check_data, check_method

# Scales the MAD such that it estimates the SD of a normal distribution
MAD_SCALE = -1 / (np.sqrt(2) * erfcinv(3 / 2))

OUTLIER_METHODS = ('sd', 'iqr', 'mad', 'percentile')
OUTLIER_HANDLING = ('winsorize', 'trim')

_THRESHOLD_ARITY = {'sd': 1, 'iqr': 3, 'mad': 1, 'percentile': 2}

# percentile: (upper percentile, lower percentile)
_DEFAULT_THRESHOLD = {'sd': (3,),
                      'iqr': (1.5, 75, 25),
                      'mad': (3,),
                      'percentile': (90, 10)}

_ARITY_MSG = {'sd': 'Threshold with SD only needs one threshold value',
              'mad': 'Threshold with MAD only needs one threshold value',
              'percentile': 'Upper and lower percentile values needed',
              'iqr': 'Times away from IQR, and upper and lower percentile '
                     'values needed'}


def percentile(X, q):
    """ Calculates the q-th percentile of each column of X.

    Each of the n non-missing sorted values of a column is assigned the
    quantile (i - 0.5) / n (with i starting at 1); the requested quantile is
    linearly interpolated between the two bracketing values. Quantiles below
    the first or above the last position are set to the smallest or largest
    value. Missing values (NaN) are ignored.

    Parameters
    ----------
    X : array-like
        Vector or matrix of shape = [n_samples, n_features].
    q : float
        Percentile between 0 and 100.

    Returns
    -------
    prc : ndarray
        Array of shape = [n_features] with the percentile of each column;
        NaN for columns without any non-missing values.
    """

    X = check_data(X)
    if not 0 <= q <= 100:
        raise InvalidThreshold('Percentile should be between 0 and 100, '
                               'not %r' % q)

    prc = np.full(X.shape[1], np.nan)
    for i in range(X.shape[1]):
        col = X[:, i]
        col = np.sort(col[~np.isnan(col)])
        n = col.size
        if n == 0:
            continue

        positions = (np.arange(1, n + 1) - 0.5) / n
        prc[i] = np.interp(q / 100, positions, col)

    return prc


def check_threshold(method, threshold):
    """ Returns the threshold as a float array with the right arity. """

    if threshold is None:
        return np.array(_DEFAULT_THRESHOLD[method], dtype=float)

    if isinstance(threshold, str):
        if threshold == '':
            return np.array(_DEFAULT_THRESHOLD[method], dtype=float)
        raise InvalidThreshold('Threshold should be numeric, not %r'
                               % threshold)

    try:
        threshold = np.atleast_1d(np.asarray(threshold, dtype=float)).ravel()
    except (TypeError, ValueError):
        raise InvalidThreshold('Threshold should be numeric, not %r'
                               % (threshold,))

    if threshold.size == 0:
        return np.array(_DEFAULT_THRESHOLD[method], dtype=float)

    if threshold.size != _THRESHOLD_ARITY[method]:
        raise InvalidThreshold(_ARITY_MSG[method])

    return threshold


def _nan_reduce(func, X, **kwargs):
    """ Applies a NaN-ignoring reducer without 'empty slice' warnings. """
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        return func(X, axis=0, **kwargs)


def _cutoffs_sd(X, threshold):
    all_mean = _nan_reduce(np.nanmean, X)
    all_sd = _nan_reduce(np.nanstd, X, ddof=1)
    return all_mean + threshold[0] * all_sd, all_mean - threshold[0] * all_sd


def _cutoffs_iqr(X, threshold):
    k, prc_upper, prc_lower = threshold
    all_iqr = percentile(X, 75) - percentile(X, 25)
    return (percentile(X, prc_upper) + k * all_iqr,
            percentile(X, prc_lower) - k * all_iqr)


def _cutoffs_mad(X, threshold):
    all_median = _nan_reduce(np.nanmedian, X)
    mad = _nan_reduce(np.nanmedian, np.abs(X - all_median))
    return (all_median + threshold[0] * MAD_SCALE * mad,
            all_median - threshold[0] * MAD_SCALE * mad)


def _cutoffs_percentile(X, threshold):
    return percentile(X, threshold[0]), percentile(X, threshold[1])


_CUTOFF_FUNCS = {'sd': _cutoffs_sd,
                 'iqr': _cutoffs_iqr,
                 'mad': _cutoffs_mad,
                 'percentile': _cutoffs_percentile}


class OutlierDetector(BaseEstimator, TransformerMixin):
    """ Detects and treats outliers within each column of a matrix.

    Cutoffs are estimated per column during fit(); transform() returns a
    copy of the data in which values beyond the cutoffs are either clamped
    to the cutoff ('winsorize') or set to NaN ('trim'). Missing values are
    ignored when estimating cutoffs and are never flagged as outliers.

    Parameters
    ----------
    method : str
        Outlier model (case-insensitive); one of:

        * 'sd': outside mean +/- k * SD; threshold = k (default 3)
        * 'iqr': above the upper percentile + k * IQR or below the lower
          percentile - k * IQR; threshold = (k, upper percentile,
          lower percentile) (default (1.5, 75, 25))
        * 'mad': outside median +/- k * scaled MAD; threshold = k
          (default 3)
        * 'percentile': above the upper or below the lower percentile;
          threshold = (upper percentile, lower percentile) (default (90, 10));
          the upper percentile comes first, so passing (10, 90) flags
          nearly every value
    threshold : float, sequence of float or None
        Parameters of the outlier model (see above); None uses the default
        for the chosen method.
    handling : str
        How transform() treats outliers: 'winsorize' or 'trim'.

    Attributes
    ----------
    cutoff_upper_ : ndarray
        Upper cutoff per column, shape = [n_features].
    cutoff_lower_ : ndarray
        Lower cutoff per column, shape = [n_features].
    threshold_ : ndarray
        Threshold values actually used.
    """

    def __init__(self, method='iqr', threshold=None, handling='trim'):
        self.method = method
        self.threshold = threshold
        self.handling = handling

    def fit(self, X, y=None):
        """ Estimates the upper and lower cutoff of each column.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : None
            Included for compatibility; does nothing.
        """

        X = check_data(X)
        self.method_ = check_method(self.method, OUTLIER_METHODS,
                                    name='outlier method')
        self.threshold_ = check_threshold(self.method_, self.threshold)
        cutoffs = _CUTOFF_FUNCS[self.method_](X, self.threshold_)
        self.cutoff_upper_, self.cutoff_lower_ = cutoffs
        self.n_features_in_ = X.shape[1]

        return self

    def get_outlier_mask(self, X):
        """ Flags values of X outside the fitted cutoffs.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]

        Returns
        -------
        is_outlier : ndarray
            Boolean array, True where a value is above or below the cutoffs.
        is_above_upper : ndarray
            Boolean array, True where a value is above the upper cutoff.
        is_below_lower : ndarray
            Boolean array, True where a value is below the lower cutoff.
        """

        check_is_fitted(self, 'cutoff_upper_')
        X = check_data(X)
        self._check_n_columns(X)

        is_above_upper = X > self.cutoff_upper_
        is_below_lower = X < self.cutoff_lower_
        return is_above_upper | is_below_lower, is_above_upper, is_below_lower

    def transform(self, X):
        """ Winsorizes or trims outliers in (a copy of) X.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]

        Returns
        -------
        X_new : ndarray
            Treated copy of X with the same shape.
        """

        handling = check_method(self.handling, OUTLIER_HANDLING,
                                name='outlier handling')
        is_outlier, is_above, is_below = self.get_outlier_mask(X)
        X_new = check_data(X)

        if handling == 'winsorize':
            X_new = np.where(is_above, self.cutoff_upper_, X_new)
            X_new = np.where(is_below, self.cutoff_lower_, X_new)
        else:
            X_new[is_outlier] = np.nan

        return X_new

    def _check_n_columns(self, X):
        if X.shape[1] != self.n_features_in_:
            raise InvalidInput('X has %i features, but the detector was '
                               'fitted on %i' % (X.shape[1],
                                                 self.n_features_in_))


def detect_outliers(matrix, method='iqr', threshold=None):
    """ Detects outliers within each column of a matrix.

    See ``OutlierDetector`` for the available methods and thresholds.

    Parameters
    ----------
    matrix : array-like
        Vector or matrix of shape = [n_samples, n_features].
    method : str
        One of 'sd', 'iqr', 'mad' or 'percentile' (case-insensitive).
    threshold : float, sequence of float or None
        Parameters of the outlier model; None uses the method's default.

    Returns
    -------
    is_outlier : ndarray
        Boolean array with the shape of ``matrix``.
    is_above_upper : ndarray
        Boolean array with the shape of ``matrix``.
    is_below_lower : ndarray
        Boolean array with the shape of ``matrix``.
    cutoff_upper : ndarray
        Upper cutoff per column.
    cutoff_lower : ndarray
        Lower cutoff per column.
    """

    if matrix is None:
        raise InvalidInput('Please provide a vector or matrix to work with')

    detector = OutlierDetector(method=method, threshold=threshold)
    detector.fit(matrix)
    masks = detector.get_outlier_mask(matrix)

    if np.ndim(matrix) == 1:
        masks = tuple(mask.ravel() for mask in masks)

    return masks + (detector.cutoff_upper_, detector.cutoff_lower_)
