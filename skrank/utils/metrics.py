# Functions to evaluate binary classifications and to compare two
# multivariate samples.

# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

import numpy as np
from sklearn.metrics import brier_score_loss, cohen_kappa_score

from ..exceptions import InvalidInput, InvalidLabels
from .validation import check_data


def _check_binary(y, name):
    y = np.asarray(y, dtype=float).ravel()
    if y.size == 0:
        raise InvalidLabels('Please provide a vector of %s' % name)
    if np.any((y != 0) & (y != 1)):
        raise InvalidLabels('%s should be either 0 or 1' % name.capitalize())
    return y


def brier_score(predicted_prob, class_labels):
    """ Calculates the Brier score of predicted probabilities.

    Brier score = sum((predicted_prob - class_labels) ** 2) / N

    Parameters
    ----------
    predicted_prob : array-like
        Predicted probability of the positive class (1) per sample.
    class_labels : array-like
        True class (0 or 1) per sample.

    Returns
    -------
    score : float
        The Brier score (0 is perfect).
    """

    predicted_prob = np.asarray(predicted_prob, dtype=float).ravel()
    if predicted_prob.size == 0:
        raise InvalidInput('Please provide a vector of probabilities')

    if np.any((predicted_prob < 0) | (predicted_prob > 1)):
        raise InvalidInput('Probabilities should lie between 0 and 1')

    class_labels = _check_binary(class_labels, 'class labels')
    if class_labels.size != predicted_prob.size:
        raise InvalidInput('predicted_prob and class_labels should have the '
                           'same number of entries')

    return brier_score_loss(class_labels.astype(int), predicted_prob,
                            pos_label=1)


def cohen_kappa(predicted_labels, actual_labels):
    """ Calculates Cohen's kappa for binary predictions.

    Parameters
    ----------
    predicted_labels : array-like
        Predicted class (0 or 1) per sample.
    actual_labels : array-like
        True class (0 or 1) per sample.

    Returns
    -------
    kappa : float
        Agreement between predictions and truth, corrected for chance.
    """

    predicted = _check_binary(predicted_labels, 'predicted labels')
    actual = _check_binary(actual_labels, 'actual labels')

    if actual.size != predicted.size:
        raise InvalidLabels('Mismatch between number of predicted labels and '
                            'number of actual labels')

    return cohen_kappa_score(actual.astype(int), predicted.astype(int),
                             labels=[0, 1])


def dist_bhattacharyya(mat1, mat2):
    """ Calculates the Bhattacharyya distance between two samples.

    With means mu1, mu2, covariances cov1, cov2 and C = (cov1 + cov2) / 2,
    the distance is 1/8 * (mu1 - mu2) C^-1 (mu1 - mu2)' +
    1/2 * ln(det(C) / sqrt(det(cov1) * det(cov2))).

    Parameters
    ----------
    mat1 : array-like
        Sample 1 of shape = [n_samples_1, n_variables].
    mat2 : array-like
        Sample 2 of shape = [n_samples_2, n_variables].

    Returns
    -------
    d : float
        The Bhattacharyya distance.
    """

    mat1 = check_data(mat1, name='first')
    mat2 = check_data(mat2, name='second')

    if mat1.shape[1] != mat2.shape[1]:
        raise InvalidInput('Both matrices should have the same number of '
                           'variables')

    diff_mean = mat1.mean(axis=0) - mat2.mean(axis=0)
    cov1 = np.atleast_2d(np.cov(mat1, rowvar=False))
    cov2 = np.atleast_2d(np.cov(mat2, rowvar=False))
    C = (cov1 + cov2) / 2

    term1 = 1 / 8 * diff_mean.dot(np.linalg.solve(C, diff_mean))
    term2 = 1 / 2 * np.log(np.linalg.det(C) /
                           np.sqrt(np.linalg.det(cov1) * np.linalg.det(cov2)))
    return term1 + term2
