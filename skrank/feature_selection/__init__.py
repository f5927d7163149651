# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD


"""
The feature_selection subpackage ranks the features of a two-class dataset.
The `FeatureRanker` chains outlier treatment, feature scaling and one of
several scoring methods (Welch t, Wilcoxon U, Bhattacharyya distance,
ReliefF, mRMR, or differences in class means, medians or standard
deviations) and complies with the scikit-learn API, using fit() and
transform() methods. The scoring functions themselves can also be used
directly, e.g. as `score_func` in scikit-learn's univariate selectors.
"""

from .scores import (t_statistic, wilcoxon_u, bhattacharyya, mean_difference,
                     median_difference, std_difference)
from .relief import ReliefF
from .mrmr import MRMRSpearman
from .ranker import (FeatureRanker, rank_features, rank_by_methods,
                     order_from_scores, ranking_from_order)

__all__ = ['t_statistic', 'wilcoxon_u', 'bhattacharyya', 'mean_difference',
           'median_difference', 'std_difference', 'ReliefF', 'MRMRSpearman',
           'FeatureRanker', 'rank_features', 'rank_by_methods',
           'order_from_scores', 'ranking_from_order']
