# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

"""
The preproc subpackage contains scikit-learn style transformers that
prepare a feature matrix before ranking: the `OutlierDetector` estimates
column-wise outlier cutoffs (SD, IQR, MAD or percentile based) and
winsorizes or trims values beyond them, and the `FeatureScaler` rescales,
mean-normalizes or standardizes each feature. Functional equivalents
(`detect_outliers`, `feature_scaling`) are included as well.
"""

from .outliers import OutlierDetector, detect_outliers, percentile
from .scaling import FeatureScaler, feature_scaling

__all__ = ['OutlierDetector', 'detect_outliers', 'percentile',
           'FeatureScaler', 'feature_scaling']
