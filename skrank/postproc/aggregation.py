# Class to aggregate several rankings of the same features into a single
# consensus ranking.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import numpy as np
from sklearn.base import BaseEstimator
from sklearn.utils import check_random_state

from ..exceptions import InvalidInput
from ..feature_selection.ranker import rank_by_methods, ranking_from_order
from ..utils.validation import check_data, check_method

AGGREGATION_METHODS = ('min', 'mean', 'median', 'minvar')
TIE_BREAK_METHODS = ('rand', 'ascend', 'minvar')
_TIE_BREAK_ALIASES = {'random': 'rand', 'ascending': 'ascend'}


def check_rank_matrix(rank_matrix):
    """ Checks that every column of rank_matrix ranks each feature once.

    Parameters
    ----------
    rank_matrix : array-like
        Matrix of shape = [n_features, n_rankings]; a vector is treated as
        a single ranking.

    Returns
    -------
    rank_matrix : ndarray
        Float copy of the rank matrix.

    Raises
    ------
    InvalidInput
        If rank_matrix is empty or a column is not a permutation of
        1 ... n_features.
    """

    rank_matrix = check_data(rank_matrix, name='rank')
    n_features = rank_matrix.shape[0]
    expected = np.arange(1, n_features + 1)

    for col in range(rank_matrix.shape[1]):
        if not np.array_equal(np.sort(rank_matrix[:, col]), expected):
            raise InvalidInput('Column %i of the rank matrix is not a '
                               'permutation of 1 ... %i' % (col, n_features))

    return rank_matrix


def _row_variance(matrix):
    """ Variance across columns; sample variance if there are two or more.

    Ranks are integers, so the variance is computed from integer sums; rows
    holding the same ranks in any order get bit-identical variances.
    """
    ranks = np.rint(matrix).astype(np.int64)
    n_runs = ranks.shape[1]
    ddof = 1 if n_runs > 1 else 0
    numerator = n_runs * (ranks ** 2).sum(axis=1) - ranks.sum(axis=1) ** 2
    return numerator / float(n_runs * (n_runs - ddof))


class RankAggregator(BaseEstimator):
    """ Aggregates multiple rankings into a consensus ranking.

    Each feature's ranks (one per ranking run) are summarized into a single
    value; features are then sorted in ascending order of that value (lower
    is better). Features with exactly the same aggregate value are tied,
    and ties are resolved with tie_break.

    Parameters
    ----------
    agg_method : str
        How to summarize the ranks of a feature; one of:

        * 'min': the best (minimum) rank
        * 'mean': the average rank
        * 'median': the median rank
        * 'minvar': the variance of the ranks (most stable feature first)
    prenormalize : bool
        Whether to express the ranks as fractions of the number of features
        (1/n_features ... 1). This only rescales aggregate_scores_; the
        consensus order is the same either way.
    tie_break : str
        How to order tied features; one of:

        * 'rand': randomly (see random_state)
        * 'ascend': lowest feature index first
        * 'minvar': the feature whose ranks vary least first; features
          whose variances also tie keep ascending order
    random_state : int, RandomState instance or None
        Source of randomness for tie_break='rand'.

    Attributes
    ----------
    aggregate_scores_ : ndarray
        Aggregate value of each feature, shape = [n_features].
    aggregate_rank_ : ndarray
        Feature indices in order of consensus rank, i.e. aggregate_rank_[0]
        is the index of the best feature.
    ranking_ : ndarray
        Consensus rank (starting at 1) of each feature.
    """

    def __init__(self, agg_method='median', prenormalize=True,
                 tie_break='minvar', random_state=None):

        self.agg_method = agg_method
        self.prenormalize = prenormalize
        self.tie_break = tie_break
        self.random_state = random_state

    def fit(self, rank_matrix, y=None):
        """ Computes the consensus ranking.

        Parameters
        ----------
        rank_matrix : ndarray
            Array of shape = [n_features, n_rankings] in which each column
            holds the ranks (1 ... n_features) from one ranking run.
        y : None
            Included for compatibility; does nothing.
        """

        rank_matrix = check_rank_matrix(rank_matrix)
        agg_method = check_method(self.agg_method, AGGREGATION_METHODS,
                                  name='agg_method')
        tie_break = check_method(self.tie_break, TIE_BREAK_METHODS,
                                 name='tie_break', aliases=_TIE_BREAK_ALIASES)

        if not isinstance(self.prenormalize, (bool, np.bool_)):
            raise InvalidInput('prenormalize should be either True or False')

        # Ties are found on the raw integer ranks; prenormalizing only
        # rescales the reported scores
        n_features = rank_matrix.shape[0]

        if agg_method == 'min':
            to_work = rank_matrix.min(axis=1)
        elif agg_method == 'mean':
            to_work = rank_matrix.mean(axis=1)
        elif agg_method == 'median':
            to_work = np.median(rank_matrix, axis=1)
        else:
            to_work = _row_variance(rank_matrix)

        agg_rank = np.argsort(to_work, kind='stable')
        rng = check_random_state(self.random_state)

        # Tied features occupy consecutive positions in agg_rank,
        # in ascending order of feature index
        values, counts = np.unique(to_work, return_counts=True)
        for value in values[counts > 1]:
            loc = np.flatnonzero(to_work[agg_rank] == value)
            tied = agg_rank[loc]

            if tie_break == 'rand':
                agg_rank[loc] = tied[rng.permutation(tied.size)]
            elif tie_break == 'minvar':
                tmp_var = _row_variance(rank_matrix[tied, :])
                agg_rank[loc] = tied[np.argsort(tmp_var, kind='stable')]

        if self.prenormalize:
            # Variance scales with the square of the ranks
            power = 2 if agg_method == 'minvar' else 1
            to_work = to_work / float(n_features) ** power

        self.aggregate_scores_ = to_work
        self.aggregate_rank_ = agg_rank
        self.ranking_ = ranking_from_order(agg_rank)

        return self


def aggregate_rank(rank_matrix, agg_method='median', prenormalize=True,
                   break_ties='minvar', random_state=None):
    """ Aggregates a matrix of ranks into a consensus rank order.

    See ``RankAggregator`` for a description of the arguments.

    Returns
    -------
    agg_ranks : ndarray
        Feature indices in order of consensus rank, i.e. agg_ranks[0] is the
        index of the feature whose aggregate rank is 1.
    """

    aggregator = RankAggregator(agg_method=agg_method,
                                prenormalize=prenormalize,
                                tie_break=break_ties,
                                random_state=random_state)
    return aggregator.fit(rank_matrix).aggregate_rank_


def consensus_rank(X, y, rank_methods, aggregator=None, **ranker_kwargs):
    """ Ranks features with several methods and aggregates the rankings.

    Parameters
    ----------
    X : ndarray
        Numeric (float) array of shape = [n_samples, n_features]
    y : ndarray
        Class labels (0 or 1) of shape = [n_samples]
    rank_methods : list of str
        Ranking methods (see ``skrank.feature_selection.FeatureRanker``).
    aggregator : RankAggregator or None
        Aggregator to combine the rankings; None uses the defaults.
    **ranker_kwargs : key-word arguments
        Other parameters passed to every ``FeatureRanker``.

    Returns
    -------
    agg_ranks : ndarray
        Feature indices in order of consensus rank.
    """

    rank_matrix = rank_by_methods(X, y, rank_methods, **ranker_kwargs)

    if aggregator is None:
        aggregator = RankAggregator()

    return aggregator.fit(rank_matrix).aggregate_rank_
