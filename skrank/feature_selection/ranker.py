# Class to rank features of a two-class dataset, optionally after
# treating outliers and scaling the features.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from ..exceptions import InvalidInput, UnknownMethod
from ..preproc.outliers import (OutlierDetector, OUTLIER_METHODS,
                                OUTLIER_HANDLING, check_threshold)
from ..preproc.scaling import (FeatureScaler, SCALING_METHODS,
                               SCALING_ALIASES)
from ..utils.validation import check_data, check_labels, check_method
from .scores import (t_statistic, wilcoxon_u, bhattacharyya, mean_difference,
                     median_difference, std_difference)
from .relief import ReliefF
from .mrmr import MRMRSpearman

RANK_METHODS = ('tstats', 'wilcoxon', 'bhattacharyya', 'relieff', 'mrmr',
                'dmean', 'dmedian', 'dstd')
_RANK_ALIASES = {'t_stat': 'tstats', 'tstat': 'tstats'}

_SCORE_FUNCS = {'tstats': t_statistic,
                'wilcoxon': wilcoxon_u,
                'bhattacharyya': bhattacharyya,
                'dmean': mean_difference,
                'dmedian': median_difference,
                'dstd': std_difference}


def order_from_scores(scores):
    """ Sorts features by descending absolute score.

    Ties keep the original column order (lowest index first) and features
    with a NaN score are put last.

    Parameters
    ----------
    scores : ndarray
        Score per feature, shape = [n_features].

    Returns
    -------
    rank_order : ndarray
        Column indices, best first.
    """

    key = np.abs(np.asarray(scores, dtype=float))
    key[np.isnan(key)] = -np.inf
    return np.argsort(-key, kind='stable')


def ranking_from_order(rank_order):
    """ Inverts a rank order into the (1-based) rank of each feature. """

    rank_order = np.asarray(rank_order)
    ranking = np.empty(rank_order.size, dtype=int)
    ranking[rank_order] = np.arange(1, rank_order.size + 1)
    return ranking


class FeatureRanker(BaseEstimator, TransformerMixin):
    """ Ranks features by how well they separate two classes.

    During fit(), the following steps are run in order:

    1. Outliers are detected per feature (unless outlier_method='none');
    2. Outliers are winsorized or trimmed (set to NaN);
    3. Features are scaled (unless std_method='none');
    4. Each feature is scored with rank_method;
    5. Features are sorted by descending absolute score.

    All statistics ignore missing values, so trimmed outliers simply drop
    out of the computations. Ties keep the lowest column index first and
    features with an undefined (NaN) score are ranked last.

    Parameters
    ----------
    rank_method : str
        One of (case-insensitive):

        * 'tstats': Welch t-statistic (unequal variances)
        * 'wilcoxon': Mann-Whitney U statistic of class 0
        * 'bhattacharyya': univariate Bhattacharyya distance
        * 'relieff': ReliefF weight (k=10)
        * 'mrmr': mRMR order based on Spearman correlations
        * 'dmean': absolute difference of class means
        * 'dmedian': absolute difference of class medians
        * 'dstd': absolute difference of class standard deviations
    std_method : str
        Feature scaling; 'rescale', 'mean', 'std' or 'none' (see
        ``skrank.preproc.FeatureScaler``).
    outlier_method : str
        Outlier model; 'sd', 'iqr', 'mad', 'percentile' or 'none' (see
        ``skrank.preproc.OutlierDetector``).
    outlier_threshold : float, sequence of float or None
        Parameters of the outlier model; None uses its default.
    outlier_handling : str
        'winsorize' (clamp outliers to the cutoffs) or 'trim' (set
        outliers to NaN).
    relieff : object or None
        Object with a ``weights(X, y)`` method returning one weight per
        feature; defaults to ``ReliefF(n_neighbors=10)``.
    mrmr : object or None
        Object with a ``rank(X, y, n_features)`` method returning column
        indices in order of preference; defaults to ``MRMRSpearman()``.
    verbose : bool
        Whether to print the progress of the ranking steps.

    Attributes
    ----------
    scores_ : ndarray or None
        Score per feature (None for rank_method='mrmr').
    rank_order_ : ndarray
        Column indices ordered from rank 1 to rank n_features.
    ranking_ : ndarray
        Rank (starting at 1) of each feature, in original column order.
    outlier_mask_ : ndarray or None
        Boolean array flagging the detected outliers (None if outlier
        detection was skipped).
    """

    def __init__(self, rank_method='relieff', std_method='std',
                 outlier_method='mad', outlier_threshold=None,
                 outlier_handling='trim', relieff=None, mrmr=None,
                 verbose=False):

        self.rank_method = rank_method
        self.std_method = std_method
        self.outlier_method = outlier_method
        self.outlier_threshold = outlier_threshold
        self.outlier_handling = outlier_handling
        self.relieff = relieff
        self.mrmr = mrmr
        self.verbose = verbose

    def _check_params(self):
        rank_method = check_method(self.rank_method, RANK_METHODS,
                                   name='rank_method', aliases=_RANK_ALIASES)
        std_method = check_method(self.std_method, SCALING_METHODS,
                                  name='std_method', aliases=SCALING_ALIASES)
        outlier_method = check_method(self.outlier_method,
                                      OUTLIER_METHODS + ('none',),
                                      name='outlier_method')
        outlier_handling = check_method(self.outlier_handling,
                                        OUTLIER_HANDLING,
                                        name='outlier_handling')

        if outlier_method != 'none':
            check_threshold(outlier_method, self.outlier_threshold)

        if rank_method == 'relieff':
            collaborator = ReliefF(n_neighbors=10) if self.relieff is None \
                else self.relieff
            if not hasattr(collaborator, 'weights'):
                raise UnknownMethod('The relieff object should have a '
                                    'weights(X, y) method')
        elif rank_method == 'mrmr':
            collaborator = MRMRSpearman() if self.mrmr is None else self.mrmr
            if not hasattr(collaborator, 'rank'):
                raise UnknownMethod('The mrmr object should have a '
                                    'rank(X, y, n_features) method')
        else:
            collaborator = _SCORE_FUNCS[rank_method]

        return (rank_method, std_method, outlier_method, outlier_handling,
                collaborator)

    def fit(self, X, y):
        """ Fits FeatureRanker.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        y : List[int] or numpy ndarray[int]
            Class labels (0 or 1) of shape = [n_samples]
        """

        X = check_data(X)
        y = check_labels(y, X.shape[0])
        (rank_method, std_method, outlier_method, outlier_handling,
         collaborator) = self._check_params()
        n_features = X.shape[1]

        self.outlier_mask_ = None
        if outlier_method != 'none':
            detector = OutlierDetector(method=outlier_method,
                                       threshold=self.outlier_threshold,
                                       handling=outlier_handling)
            detector.fit(X)
            self.outlier_mask_ = detector.get_outlier_mask(X)[0]
            X = detector.transform(X)

            if self.verbose:
                print('Found %i outliers (method: %s); handling: %s'
                      % (self.outlier_mask_.sum(), outlier_method,
                         outlier_handling))

        if std_method != 'none':
            X = FeatureScaler(method=std_method).fit_transform(X)

        if self.verbose:
            print('Ranking %i features using %s ...' % (n_features,
                                                        rank_method))

        if rank_method == 'mrmr':
            self.scores_ = None
            rank_order = np.asarray(collaborator.rank(X, y, n_features))
            if not np.array_equal(np.sort(rank_order), np.arange(n_features)):
                raise InvalidInput('The mrmr object should return every '
                                   'feature index exactly once')
        else:
            if rank_method == 'relieff':
                scores = collaborator.weights(X, y)
            else:
                scores = collaborator(X, y)

            self.scores_ = np.asarray(scores, dtype=float).ravel()
            rank_order = order_from_scores(self.scores_)

        self.rank_order_ = rank_order
        self.ranking_ = ranking_from_order(rank_order)
        self.n_features_in_ = n_features

        return self

    def transform(self, X, n_features=None):
        """ Reorders (and optionally selects) features by their rank.

        Parameters
        ----------
        X : ndarray
            Numeric (float) array of shape = [n_samples, n_features]
        n_features : int or None
            Number of best-ranked features to keep; None keeps all.

        Returns
        -------
        X_new : ndarray
            array of shape = [n_samples, n_features] with the best-ranked
            feature in the first column.
        """

        check_is_fitted(self, 'rank_order_')
        X = check_data(X)

        if X.shape[1] != self.n_features_in_:
            raise InvalidInput('X has %i features, but the ranker was fitted '
                               'on %i' % (X.shape[1], self.n_features_in_))

        return X[:, self.rank_order_[:n_features]]


def rank_features(data, classes, rank_method='relieff', std_method='std',
                  out_method='mad', out_thresh=None, out_handle='trim'):
    """ Ranks the features (columns) of data given binary class labels.

    See ``FeatureRanker`` for a description of the arguments.

    Returns
    -------
    rank_order : ndarray
        Column indices in ascending order of rank, i.e. rank_order[0] is
        the index of the feature ranked first.
    ranking : ndarray
        Rank (starting at 1) of each feature in original column order,
        i.e. ranking[0] is the rank of the first column.
    """

    ranker = FeatureRanker(rank_method=rank_method, std_method=std_method,
                           outlier_method=out_method,
                           outlier_threshold=out_thresh,
                           outlier_handling=out_handle)
    ranker.fit(data, classes)
    return ranker.rank_order_, ranker.ranking_


def rank_by_methods(X, y, rank_methods, **ranker_kwargs):
    """ Ranks features with several methods and stacks the rankings.

    Parameters
    ----------
    X : ndarray
        Numeric (float) array of shape = [n_samples, n_features]
    y : ndarray
        Class labels (0 or 1) of shape = [n_samples]
    rank_methods : list of str
        Ranking methods (see ``FeatureRanker``).
    **ranker_kwargs : key-word arguments
        Other parameters passed to every ``FeatureRanker``.

    Returns
    -------
    rank_matrix : ndarray
        Integer array of shape = [n_features, n_methods] in which column j
        holds the rank of each feature according to rank_methods[j].
    """

    if isinstance(rank_methods, str):
        rank_methods = [rank_methods]

    if len(rank_methods) == 0:
        raise InvalidInput('Please provide at least one ranking method')

    rankings = [FeatureRanker(rank_method=method, **ranker_kwargs)
                .fit(X, y).ranking_ for method in rank_methods]
    return np.column_stack(rankings)
