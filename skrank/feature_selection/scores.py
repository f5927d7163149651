# Univariate scoring functions that quantify how well each feature
# separates class 0 from class 1. All functions ignore missing values.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import warnings
from warnings import warn
import numpy as np
from scipy import stats

from ..utils.validation import check_data, check_labels


def _split_classes(X, y):
    X = check_data(X)
    y = check_labels(y, X.shape[0])
    return X[y == 0, :], X[y == 1, :]


def t_statistic(X, y):
    """ Calculates the Welch t-statistic (unequal variances) per feature.

    Parameters
    ----------
    X : {array-like}  shape = (n_samples, n_features)
        The data matrix; may contain NaNs.
    y : array of shape(n_samples)
        Class labels (0 or 1).

    Returns
    -------
    scores : array, shape=(n_features,)
        t-statistic of class 0 versus class 1.
    """

    X0, X1 = _split_classes(X, y)
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        tstat, _ = stats.ttest_ind(X0, X1, axis=0, equal_var=False,
                                   nan_policy='omit')

    return np.asarray(tstat, dtype=float).ravel()


def wilcoxon_u(X, y):
    """ Calculates the Mann-Whitney U statistic per feature.

    U is derived from the rank sum of class 0 as
    U = ranksum - n0 * (n0 + 1) / 2, where ties receive their mid-rank.

    Parameters
    ----------
    X : {array-like}  shape = (n_samples, n_features)
        The data matrix; may contain NaNs.
    y : array of shape(n_samples)
        Class labels (0 or 1).

    Returns
    -------
    scores : array, shape=(n_features,)
        U statistic of class 0; NaN if a class has no observations.
    """

    X0, X1 = _split_classes(X, y)
    scores = np.full(X0.shape[1], np.nan)

    for feat in range(X0.shape[1]):
        x0 = X0[~np.isnan(X0[:, feat]), feat]
        x1 = X1[~np.isnan(X1[:, feat]), feat]
        n0 = x0.size
        if n0 == 0 or x1.size == 0:
            continue

        ranks = stats.rankdata(np.concatenate([x0, x1]))
        scores[feat] = ranks[:n0].sum() - n0 * (n0 + 1) / 2

    return scores


def bhattacharyya(X, y):
    """ Calculates the univariate Bhattacharyya distance per feature.

    The distance is term1 + term2, with term1 = 1/8 * (mu0 - mu1)^2 / C and
    term2 = 1/2 * ln(C / sqrt(C0 * C1)), where C0 and C1 are the class
    variances and C their average. Features for which the distance is not
    a finite real number (e.g. zero variance) get a score of NaN.

    Parameters
    ----------
    X : {array-like}  shape = (n_samples, n_features)
        The data matrix; may contain NaNs.
    y : array of shape(n_samples)
        Class labels (0 or 1).

    Returns
    -------
    scores : array, shape=(n_features,)
        Bhattacharyya distance between the classes.
    """

    X0, X1 = _split_classes(X, y)

    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        diff_mean = np.nanmean(X0, axis=0) - np.nanmean(X1, axis=0)
        C0 = np.nanvar(X0, axis=0, ddof=1)
        C1 = np.nanvar(X1, axis=0, ddof=1)

    C = (C0 + C1) / 2
    with np.errstate(divide='ignore', invalid='ignore'):
        term1 = 1 / 8 * diff_mean ** 2 / C
        term2 = 1 / 2 * np.log(C / np.sqrt(C0 * C1))
        scores = term1 + term2

    bad = ~np.isfinite(scores)
    if bad.any():
        warn('Bhattacharyya distance is undefined for feature(s) %s; '
             'their scores are set to NaN' % np.flatnonzero(bad).tolist())
        scores[bad] = np.nan

    return scores


def mean_difference(X, y):
    """ Absolute difference between the class means of each feature. """

    X0, X1 = _split_classes(X, y)
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        return np.abs(np.nanmean(X0, axis=0) - np.nanmean(X1, axis=0))


def median_difference(X, y):
    """ Absolute difference between the class medians of each feature. """

    X0, X1 = _split_classes(X, y)
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        return np.abs(np.nanmedian(X0, axis=0) - np.nanmedian(X1, axis=0))


def std_difference(X, y):
    """ Absolute difference between the class standard deviations. """

    X0, X1 = _split_classes(X, y)
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        return np.abs(np.nanstd(X0, axis=0, ddof=1) -
                      np.nanstd(X1, axis=0, ddof=1))
