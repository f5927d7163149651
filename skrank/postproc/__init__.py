# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

"""
The postproc subpackage combines the output of several ranking runs. The
`RankAggregator` turns a rank matrix (features x runs) into one consensus
ranking using the min, mean, median or variance of each feature's ranks,
with random, ascending or minimum-variance tie-breaking.
"""

from .aggregation import (RankAggregator, aggregate_rank, consensus_rank,
                          check_rank_matrix)

__all__ = ['RankAggregator', 'aggregate_rank', 'consensus_rank',
           'check_rank_matrix']
