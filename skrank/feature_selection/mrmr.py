# Class to rank features with minimum-redundancy-maximum-relevance (mRMR)
# using Spearman correlations.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator

from ..exceptions import InvalidInput, InvalidLabels
from ..utils.validation import check_data


class MRMRSpearman(BaseEstimator):
    """ Orders features with the mRMR criterion based on Spearman's rho.

    Relevance is the absolute Spearman correlation between a feature and
    the labels, redundancy the absolute Spearman correlation between two
    features; both use pairwise-complete observations, so missing values
    are allowed. The most relevant feature is selected first, after which
    the feature maximizing relevance minus its mean redundancy with the
    already selected features is added, until n_features are selected.
    Undefined correlations (e.g. constant features) are treated as 0. See
    [1]_.

    References
    ----------
    [1] A. Tsanas, M.A. Little, P.E. McSharry. A methodology for the
    analysis of medical data. In: Handbook of Systems and Complexity in
    Health, pp. 113-125, Springer, 2013.

    Parameters
    ----------
    n_features : int or None
        Number of features to select; None selects all features.

    Attributes
    ----------
    selected_features_ : ndarray
        Column indices in order of selection.
    relevance_ : ndarray
        Absolute Spearman correlation of each feature with the labels.
    """

    def __init__(self, n_features=None):
        self.n_features = n_features

    def fit(self, X, y):
        """ Runs the greedy mRMR selection.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : ndarray
            Class labels of shape = [n_samples]
        """

        X = check_data(X)
        y = np.asarray(y, dtype=float).ravel()
        n_samples, n_total = X.shape

        if y.size != n_samples:
            raise InvalidLabels('Mismatch between number of samples (%i) and '
                                'number of class labels (%i)'
                                % (n_samples, y.size))

        n_select = n_total if self.n_features is None else int(self.n_features)
        if not 1 <= n_select <= n_total:
            raise InvalidInput('n_features should be between 1 and %i, not %r'
                               % (n_total, self.n_features))

        df = pd.DataFrame(np.column_stack([X, y]))
        corr = df.corr(method='spearman', min_periods=2).abs().to_numpy()
        corr = np.nan_to_num(corr, nan=0.0)
        relevance = corr[:n_total, n_total]
        redundancy = corr[:n_total, :n_total]

        selected = [int(np.argmax(relevance))]
        remaining = [i for i in range(n_total) if i != selected[0]]

        while len(selected) < n_select:
            candidates = np.array(remaining)
            mrmr = (relevance[candidates] -
                    redundancy[np.ix_(candidates, selected)].mean(axis=1))
            best = int(candidates[np.argmax(mrmr)])
            selected.append(best)
            remaining.remove(best)

        self.relevance_ = relevance
        self.selected_features_ = np.array(selected)
        return self

    def rank(self, X, y, n_features=None):
        """ Returns column indices ordered from most to least preferred.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : ndarray
            Class labels of shape = [n_samples]
        n_features : int or None
            Overrides the n_features parameter for this call.
        """

        if n_features is not None:
            self.set_params(n_features=n_features)

        return self.fit(X, y).selected_features_
