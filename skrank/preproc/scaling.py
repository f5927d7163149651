# Class to scale each feature (column) independently.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import warnings
import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from ..exceptions import InvalidInput
from ..utils.validation import check_data, check_method

SCALING_METHODS = ('rescale', 'mean', 'std', 'none')
SCALING_ALIASES = {'mean_center': 'mean', 'std_unit': 'std'}


class FeatureScaler(BaseEstimator, TransformerMixin):
    """ Scales each feature of X independently.

    Parameters
    ----------
    method : str
        Scaling method (case-insensitive); one of:

        * 'rescale': (x - min(x)) / (max(x) - min(x))
        * 'mean': (x - mean(x)) / (max(x) - min(x))
        * 'std': (x - mean(x)) / std(x)
        * 'none': no scaling

        'mean_center' and 'std_unit' are accepted for 'mean' and 'std'.
        Missing values are ignored when computing the statistics and
        remain missing after scaling. Constant features are mapped to 0
        instead of NaN.

    Attributes
    ----------
    center_ : ndarray
        Value subtracted from each feature.
    scale_ : ndarray
        Value each centered feature is divided by.
    """

    def __init__(self, method='std'):
        self.method = method

    def fit(self, X, y=None):
        """ Computes the per-feature center and scale.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : None
            Included for compatibility; does nothing.
        """

        X = check_data(X)
        self.method_ = check_method(self.method, SCALING_METHODS,
                                    name='scaling method',
                                    aliases=SCALING_ALIASES)
        n_features = X.shape[1]

        with warnings.catch_warnings():
            warnings.simplefilter('ignore', category=RuntimeWarning)

            if self.method_ == 'none':
                center = np.zeros(n_features)
                scale = np.ones(n_features)
            elif self.method_ == 'rescale':
                center = np.nanmin(X, axis=0)
                scale = np.nanmax(X, axis=0) - center
            elif self.method_ == 'mean':
                center = np.nanmean(X, axis=0)
                scale = np.nanmax(X, axis=0) - np.nanmin(X, axis=0)
            else:
                center = np.nanmean(X, axis=0)
                scale = np.nanstd(X, axis=0, ddof=1)

        # Constant (or single-valued) features
        scale[(scale == 0) | np.isnan(scale)] = 1.0

        self.center_ = center
        self.scale_ = scale
        return self

    def transform(self, X):
        """ Scales X with the statistics computed during fit().

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]

        Returns
        -------
        X_new : ndarray
            Scaled copy of X.
        """

        check_is_fitted(self, 'scale_')
        X = check_data(X)

        if X.shape[1] != self.scale_.size:
            raise InvalidInput('X has %i features, but the scaler was fitted '
                               'on %i' % (X.shape[1], self.scale_.size))

        return (X - self.center_) / self.scale_


def feature_scaling(feature_matrix, method='rescale'):
    """ Scales each column of a feature matrix independently.

    Parameters
    ----------
    feature_matrix : array-like
        Matrix of shape = [n_samples, n_features].
    method : str
        One of 'rescale', 'mean', 'std' or 'none' (see ``FeatureScaler``).

    Returns
    -------
    scaled_feature_matrix : ndarray
        Scaled copy of ``feature_matrix``.
    """
    return FeatureScaler(method=method).fit_transform(feature_matrix)
