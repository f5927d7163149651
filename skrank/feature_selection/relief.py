# Class to weigh features with the ReliefF algorithm.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import warnings
from warnings import warn
import numpy as np
from sklearn.base import BaseEstimator

from ..exceptions import InvalidInput, InvalidLabels
from ..utils.validation import check_data


class ReliefF(BaseEstimator):
    """ Weighs features with ReliefF (classification mode).

    For every sample, the k nearest neighbors from its own class (hits)
    and the k nearest neighbors from each other class (misses) are found
    using the L1 distance on range-normalized features. A feature's weight
    decreases with its average difference to the hits and increases with
    its (class-prior weighted) average difference to the misses. See [1]_.

    Missing values contribute a difference of zero, both to the distances
    and to the weight updates.

    References
    ----------
    [1] M. Robnik-Sikonja and I. Kononenko. Theoretical and empirical
    analysis of ReliefF and RReliefF. Machine Learning, 53, 23-69, 2003.

    Parameters
    ----------
    n_neighbors : int
        Number of nearest hits and misses (k) per sample.

    Attributes
    ----------
    feature_importances_ : ndarray
        ReliefF weight per feature, shape = [n_features].
    """

    def __init__(self, n_neighbors=10):
        self.n_neighbors = n_neighbors

    def fit(self, X, y):
        """ Computes the ReliefF weight of each feature.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : ndarray
            Class labels of shape = [n_samples]
        """

        X = check_data(X)
        y = np.asarray(y).ravel()
        n_samples, n_features = X.shape

        if y.size != n_samples:
            raise InvalidLabels('Mismatch between number of samples (%i) and '
                                'number of class labels (%i)'
                                % (n_samples, y.size))

        if int(self.n_neighbors) < 1:
            raise InvalidInput('n_neighbors should be at least 1, not %r'
                               % self.n_neighbors)

        classes, counts = np.unique(y, return_counts=True)
        if classes.size < 2:
            raise InvalidLabels('ReliefF needs at least two classes')

        if counts.min() <= self.n_neighbors:
            warn('The smallest class has %i samples; ReliefF will use fewer '
                 'than %i neighbors for some samples'
                 % (counts.min(), self.n_neighbors))

        priors = dict(zip(classes, counts / n_samples))

        with warnings.catch_warnings():
            warnings.simplefilter('ignore', category=RuntimeWarning)
            mins = np.nanmin(X, axis=0)
            ranges = np.nanmax(X, axis=0) - mins

        ranges[(ranges == 0) | np.isnan(ranges)] = 1.0
        X_norm = (X - mins) / ranges

        weights = np.zeros(n_features)
        all_idx = np.arange(n_samples)

        for i in range(n_samples):
            diffs = np.abs(X_norm - X_norm[i])
            diffs[np.isnan(diffs)] = 0
            dist = diffs.sum(axis=1)

            for c in classes:
                idx = all_idx[(y == c) & (all_idx != i)]
                if idx.size == 0:
                    continue

                # Manual search instead of NearestNeighbors: distances must
                # skip missing (trimmed) values, which sklearn cannot do
                k = min(int(self.n_neighbors), idx.size)
                nearest = idx[np.argsort(dist[idx], kind='stable')[:k]]
                contrib = diffs[nearest].mean(axis=0)

                if c == y[i]:
                    weights -= contrib
                else:
                    weights += priors[c] / (1 - priors[y[i]]) * contrib

        self.feature_importances_ = weights / n_samples
        return self

    def weights(self, X, y):
        """ Fits ReliefF and returns the weight of each feature. """
        return self.fit(X, y).feature_importances_
