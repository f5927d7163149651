import pytest
import numpy as np
from skrank.exceptions import InvalidInput, UnknownMethod
from skrank.preproc import FeatureScaler, feature_scaling

rng = np.random.RandomState(0)
X = rng.normal(loc=5, scale=3, size=(30, 3))


@pytest.mark.scaling
def test_rescale():
    X_new = feature_scaling(X, 'rescale')
    np.testing.assert_allclose(X_new.min(axis=0), 0, atol=1e-12)
    np.testing.assert_allclose(X_new.max(axis=0), 1)


@pytest.mark.scaling
def test_mean_normalization():
    X_new = feature_scaling(X, 'mean')
    np.testing.assert_allclose(X_new.mean(axis=0), 0, atol=1e-12)
    np.testing.assert_allclose(X_new.max(axis=0) - X_new.min(axis=0), 1)


@pytest.mark.scaling
@pytest.mark.parametrize("method", ['std', 'STD_UNIT'])
def test_standardization(method):
    X_new = feature_scaling(X, method)
    np.testing.assert_allclose(X_new.mean(axis=0), 0, atol=1e-12)
    np.testing.assert_allclose(X_new.std(axis=0, ddof=1), 1)


@pytest.mark.scaling
def test_none_returns_copy():
    X_new = feature_scaling(X, 'none')
    np.testing.assert_array_equal(X_new, X)
    assert X_new is not X


@pytest.mark.scaling
def test_nan_and_constant_features():
    X_nan = X.copy()
    X_nan[:3, 0] = np.nan
    X_nan[:, 2] = 7.0

    X_new = FeatureScaler(method='std').fit_transform(X_nan)
    assert np.isnan(X_new[:3, 0]).all()
    assert np.nanmean(X_new[:, 0]) == pytest.approx(0, abs=1e-12)
    assert np.nanstd(X_new[:, 0], ddof=1) == pytest.approx(1)
    np.testing.assert_array_equal(X_new[:, 2], 0)


@pytest.mark.scaling
def test_invalid_method_and_shape():
    with pytest.raises(UnknownMethod):
        feature_scaling(X, 'zscore')

    scaler = FeatureScaler().fit(X)
    with pytest.raises(InvalidInput):
        scaler.transform(X[:, :2])
