# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

"""
The utils subpackage contains some extra utilities: validation of data
matrices, label vectors and method names (used throughout skrank),
`summarize_data` for a table of descriptive statistics per variable, and
a few evaluation metrics for binary classification (`brier_score`,
`cohen_kappa`) and for comparing two multivariate samples
(`dist_bhattacharyya`).
"""

from .validation import check_data, check_labels, check_method
from .summary import summarize_data
from .metrics import brier_score, cohen_kappa, dist_bhattacharyya

__all__ = ['check_data', 'check_labels', 'check_method', 'summarize_data',
           'brier_score', 'cohen_kappa', 'dist_bhattacharyya']
