# Function to compute summary statistics of each variable (column) of a
# data matrix.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import warnings
from warnings import warn
import numpy as np
import pandas as pd

from ..exceptions import InvalidInput
from ..preproc.outliers import percentile
from .validation import check_data

STAT_NAMES = ['count', 'num_NaN', 'total_count', 'mean', 'median', 'mode',
              'mode_count', 'min', 'max', 'range', 'variance',
              'standard_deviation', 'quantile25th', 'quantile75th', 'IQR',
              'num_outliers_IQR', 'loc_outliers_IQR']


def _mode(col):
    """ Most frequent non-missing value (smallest if tied) and its count. """
    col = col[~np.isnan(col)]
    if col.size == 0:
        return np.nan, 0
    values, counts = np.unique(col, return_counts=True)
    idx = np.argmax(counts)
    return values[idx], counts[idx]


def summarize_data(data, variable_names=None, out_file=None, precision=2,
                   verbose=False):
    """ Calculates summary statistics for each variable.

    Quartiles are interpolated with the same convention as
    ``skrank.preproc.percentile``; values more than 1.5 IQR below the first
    or above the third quartile are counted as outliers. Missing values are
    ignored in all statistics.

    Parameters
    ----------
    data : array-like
        Vector or matrix of shape = [n_samples, n_variables].
    variable_names : list of str or None
        Name per variable; defaults to var1, var2, ...
    out_file : str or None
        If given, the statistics are written to this file (tab-delimited).
    precision : int
        Number of decimals used when writing out_file.
    verbose : bool
        Whether to print the summary table.

    Returns
    -------
    stats : DataFrame
        DataFrame with one row per statistic and one column per variable.
        The 'loc_outliers_IQR' row lists the (1-based) row numbers of the
        outliers, or 'None'.
    """

    data = check_data(data)
    n_samples, n_vars = data.shape

    if variable_names is None:
        variable_names = ['var%i' % (i + 1) for i in range(n_vars)]
    else:
        variable_names = list(variable_names)
        if len(variable_names) != n_vars:
            raise InvalidInput('Got %i variable names for %i variables'
                               % (len(variable_names), n_vars))

    is_nan = np.isnan(data)
    nan_chk = is_nan.any(axis=0)
    if nan_chk.any():
        warn('%s contain NaN values'
             % ', '.join(np.array(variable_names)[nan_chk]))

    Q1, Q3 = percentile(data, 25), percentile(data, 75)
    IQR = Q3 - Q1
    outliers = (data < Q1 - 1.5 * IQR) | (data > Q3 + 1.5 * IQR)

    with warnings.catch_warnings():
        warnings.simplefilter('ignore', category=RuntimeWarning)
        all_min = np.nanmin(data, axis=0)
        all_max = np.nanmax(data, axis=0)
        modes = [_mode(data[:, i]) for i in range(n_vars)]

        stats = {'count': (~is_nan).sum(axis=0),
                 'num_NaN': is_nan.sum(axis=0),
                 'total_count': np.repeat(n_samples, n_vars),
                 'mean': np.nanmean(data, axis=0),
                 'median': np.nanmedian(data, axis=0),
                 'mode': [m[0] for m in modes],
                 'mode_count': [m[1] for m in modes],
                 'min': all_min,
                 'max': all_max,
                 'range': all_max - all_min,
                 'variance': np.nanvar(data, axis=0, ddof=1),
                 'standard_deviation': np.nanstd(data, axis=0, ddof=1),
                 'quantile25th': Q1,
                 'quantile75th': Q3,
                 'IQR': IQR,
                 'num_outliers_IQR': outliers.sum(axis=0)}

    loc_outliers = []
    for i in range(n_vars):
        rows = np.flatnonzero(outliers[:, i]) + 1
        loc_outliers.append(' '.join(str(r) for r in rows) if rows.size
                            else 'None')
    stats['loc_outliers_IQR'] = loc_outliers

    df = pd.DataFrame([list(stats[name]) for name in STAT_NAMES],
                      index=STAT_NAMES, columns=variable_names, dtype=object)

    if verbose:
        print(df)

    if out_file is not None:
        to_write = df.copy()
        for name in STAT_NAMES[:-1]:
            to_write.loc[name] = ['%.*f' % (precision, float(v))
                                  for v in df.loc[name]]
        to_write.to_csv(out_file, sep='\t')

    return df
