import pytest
import numpy as np
from sklearn.metrics import brier_score_loss, cohen_kappa_score
from skrank.exceptions import InvalidInput, InvalidLabels
from skrank.utils import brier_score, cohen_kappa, dist_bhattacharyya


@pytest.mark.utils
def test_brier_score():
    assert brier_score([0.9, 0.2], [1, 0]) == pytest.approx(0.025)
    assert brier_score([1, 0, 1], [1, 0, 1]) == 0

    with pytest.raises(InvalidInput):
        brier_score([0.5, 0.5], [1])

    with pytest.raises(InvalidLabels):
        brier_score([0.5, 0.5], [1, 2])

    rng = np.random.RandomState(3)
    prob, labels = rng.uniform(size=40), rng.randint(2, size=40)
    assert brier_score(prob, labels) == pytest.approx(
        brier_score_loss(labels, prob))

    with pytest.raises(InvalidInput):
        brier_score([1.5, 0.5], [1, 0])


@pytest.mark.utils
def test_cohen_kappa():
    predicted, actual = [0, 1, 1, 0], [0, 1, 0, 0]
    assert cohen_kappa(predicted, actual) == pytest.approx(0.5)

    rng = np.random.RandomState(5)
    predicted, actual = rng.randint(2, size=50), rng.randint(2, size=50)
    assert cohen_kappa(predicted, actual) == pytest.approx(
        cohen_kappa_score(actual, predicted))

    with pytest.raises(InvalidLabels):
        cohen_kappa([0, 1], [0, 1, 1])


@pytest.mark.utils
def test_dist_bhattacharyya():
    rng = np.random.RandomState(2)
    mat = rng.normal(size=(30, 3))
    assert dist_bhattacharyya(mat, mat) == pytest.approx(0)
    assert dist_bhattacharyya(mat, mat + 1) > dist_bhattacharyya(mat,
                                                                 mat + 0.5)

    with pytest.raises(InvalidInput):
        dist_bhattacharyya(mat, mat[:, :2])
