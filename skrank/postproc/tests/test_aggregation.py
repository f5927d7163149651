import pytest
import numpy as np
from skrank.exceptions import InvalidInput, UnknownMethod
from skrank.postproc import RankAggregator, aggregate_rank, consensus_rank

# Rows are features, columns are ranking runs
rank_matrix = np.array([[1, 3, 3],
                        [2, 1, 1],
                        [3, 2, 2]])

# Every feature has a mean rank of 3.5
all_tied = np.column_stack([np.arange(1, 7), np.arange(6, 0, -1)])


@pytest.mark.aggregation
def test_median_aggregation():
    rm = np.array([[1, 1, 2], [2, 3, 1], [3, 2, 3]])
    np.testing.assert_array_equal(aggregate_rank(rm), [0, 1, 2])


@pytest.mark.aggregation
def test_min_with_tie_breaks():
    np.testing.assert_array_equal(
        aggregate_rank(rank_matrix, 'min', break_ties='minvar'), [1, 0, 2])
    np.testing.assert_array_equal(
        aggregate_rank(rank_matrix, 'min', break_ties='ascend'), [0, 1, 2])


@pytest.mark.aggregation
def test_mean_with_tie_breaks():
    agg = RankAggregator(agg_method='mean', prenormalize=False)
    agg.fit(rank_matrix)
    np.testing.assert_array_equal(agg.aggregate_rank_, [1, 2, 0])
    np.testing.assert_allclose(agg.aggregate_scores_, [7 / 3, 4 / 3, 7 / 3])
    np.testing.assert_array_equal(agg.ranking_, [3, 1, 2])

    agg.set_params(tie_break='ascending')
    np.testing.assert_array_equal(agg.fit(rank_matrix).aggregate_rank_,
                                  [1, 0, 2])


@pytest.mark.aggregation
def test_minvar_aggregation():
    agg_rank = aggregate_rank(rank_matrix, 'MINVAR')
    assert agg_rank[-1] == 0


@pytest.mark.aggregation
@pytest.mark.parametrize("agg_method", ['min', 'mean', 'median', 'minvar'])
def test_prenormalize_keeps_order(agg_method):
    rng = np.random.RandomState(7)
    rm = np.column_stack([rng.permutation(20) + 1 for _ in range(5)])
    np.testing.assert_array_equal(
        aggregate_rank(rm, agg_method, prenormalize=True, break_ties='ascend'),
        aggregate_rank(rm, agg_method, prenormalize=False,
                       break_ties='ascend'))


@pytest.mark.aggregation
@pytest.mark.parametrize("tie_break", ['ascend', 'minvar'])
@pytest.mark.parametrize("agg_method", ['min', 'mean', 'median', 'minvar'])
def test_prenormalize_keeps_order_over_seeds(agg_method, tie_break):
    for seed in range(25):
        rng = np.random.RandomState(seed)
        rm = np.column_stack([rng.permutation(10) + 1 for _ in range(3)])
        np.testing.assert_array_equal(
            aggregate_rank(rm, agg_method, True, tie_break),
            aggregate_rank(rm, agg_method, False, tie_break))


@pytest.mark.aggregation
def test_exact_ties_with_prenormalize():
    # Rows hold the same ranks in different orders
    rm = np.array([[1, 2, 3],
                   [3, 1, 2],
                   [2, 3, 1]])
    for agg_method in ['mean', 'median', 'minvar']:
        np.testing.assert_array_equal(
            aggregate_rank(rm, agg_method, True, 'ascend'), [0, 1, 2])

    np.testing.assert_array_equal(
        aggregate_rank(all_tied, 'mean', True, 'ascend'), np.arange(6))
    np.testing.assert_array_equal(
        aggregate_rank(all_tied, 'mean', True, 'minvar'), [2, 3, 1, 4, 0, 5])


@pytest.mark.aggregation
def test_prenormalized_scores():
    agg = RankAggregator(agg_method='mean').fit(rank_matrix)
    np.testing.assert_allclose(agg.aggregate_scores_, [7 / 9, 4 / 9, 7 / 9])

    raw = RankAggregator(agg_method='minvar', prenormalize=False)
    np.testing.assert_allclose(raw.fit(rank_matrix).aggregate_scores_,
                               np.var(rank_matrix, axis=1, ddof=1))

    scaled = RankAggregator(agg_method='minvar').fit(rank_matrix)
    np.testing.assert_allclose(scaled.aggregate_scores_,
                               np.var(rank_matrix / 3., axis=1, ddof=1))


@pytest.mark.aggregation
@pytest.mark.parametrize("tie_break", ['rand', 'ascend', 'minvar'])
@pytest.mark.parametrize("agg_method", ['min', 'mean', 'median', 'minvar'])
def test_output_is_permutation(agg_method, tie_break):
    rng = np.random.RandomState(11)
    rm = np.column_stack([rng.permutation(15) + 1 for _ in range(4)])
    agg_rank = aggregate_rank(rm, agg_method, break_ties=tie_break,
                              random_state=0)
    np.testing.assert_array_equal(np.sort(agg_rank), np.arange(15))


@pytest.mark.aggregation
def test_tie_break_determinism():
    ascend = [aggregate_rank(all_tied, 'mean', False, 'ascend')
              for _ in range(2)]
    np.testing.assert_array_equal(ascend[0], ascend[1])
    np.testing.assert_array_equal(ascend[0], np.arange(6))

    rand = [aggregate_rank(all_tied, 'mean', False, 'rand', random_state=42)
            for _ in range(2)]
    np.testing.assert_array_equal(rand[0], rand[1])
    np.testing.assert_array_equal(np.sort(rand[0]), np.arange(6))

    state = np.random.RandomState(42)
    agg = RankAggregator(agg_method='mean', prenormalize=False,
                         tie_break='random', random_state=state)
    np.testing.assert_array_equal(np.sort(agg.fit(all_tied).aggregate_rank_),
                                  np.arange(6))


@pytest.mark.aggregation
def test_minvar_tie_break_orders_by_stability():
    agg_rank = aggregate_rank(all_tied, 'mean', False, 'minvar')
    np.testing.assert_array_equal(agg_rank, [2, 3, 1, 4, 0, 5])


@pytest.mark.aggregation
def test_single_ranking():
    np.testing.assert_array_equal(aggregate_rank([3, 1, 2]), [1, 2, 0])
    np.testing.assert_array_equal(aggregate_rank([3, 1, 2], 'minvar'),
                                  [0, 1, 2])


@pytest.mark.aggregation
def test_invalid_rank_matrix():
    with pytest.raises(InvalidInput):
        aggregate_rank(None)

    with pytest.raises(InvalidInput):
        aggregate_rank(np.empty((0, 2)))

    with pytest.raises(InvalidInput):
        aggregate_rank([[1, 1], [1, 2]])

    with pytest.raises(InvalidInput):
        aggregate_rank([[1, 2], [2, 3]])


@pytest.mark.aggregation
def test_invalid_options():
    with pytest.raises(UnknownMethod):
        aggregate_rank(rank_matrix, 'max')

    with pytest.raises(UnknownMethod):
        aggregate_rank(rank_matrix, break_ties='descend')

    with pytest.raises(InvalidInput):
        aggregate_rank(rank_matrix, prenormalize='yes')


@pytest.mark.aggregation
def test_consensus_rank():
    labels = np.repeat([0, 1], 5)
    data = np.column_stack([[0, 1, 2, 3, 4, 10, 11, 12, 13, 14],
                            [5, 1, 4, 2, 3, 2, 4, 1, 5, 3],
                            [0, 1, 2, 3, 4, 2, 3, 4, 5, 6]]).astype(float)

    agg_rank = consensus_rank(data, labels, ['dmean', 'dmedian', 'tstats'],
                              std_method='none', outlier_method='none')
    assert agg_rank[0] == 0

    agg = RankAggregator(agg_method='min', tie_break='ascend')
    agg_rank = consensus_rank(data, labels, ['dmean'], aggregator=agg,
                              std_method='none', outlier_method='none')
    np.testing.assert_array_equal(agg_rank, [0, 2, 1])
