"""Tests for ranking evaluation metrics."""

import math

import pytest

from training.utils.metrics import (
    check_targets,
    evaluate_ranking,
    ndcg_at_k,
    rmse,
    spearman_correlation,
)


def test_spearman_perfect():
    result = spearman_correlation([0.1, 0.5, 0.9], [1, 2, 3])
    assert result["spearman_rho"] == pytest.approx(1.0)


def test_spearman_inverse():
    result = spearman_correlation([0.1, 0.5, 0.9], [3, 2, 1])
    assert result["spearman_rho"] == pytest.approx(-1.0)


def test_ndcg_perfect_ranking():
    assert ndcg_at_k([3, 2, 1, 0], [0.9, 0.8, 0.1, 0.0], k=3) == pytest.approx(1.0)


def test_ndcg_worse_ranking_below_one():
    assert ndcg_at_k([3, 2, 1, 0], [0.0, 0.1, 0.8, 0.9], k=2) < 1.0


def test_ndcg_all_zero_relevance():
    assert ndcg_at_k([0, 0], [0.3, 0.1]) == 0.0


def test_ndcg_invalid_k():
    with pytest.raises(ValueError):
        ndcg_at_k([1], [1], k=0)


def test_rmse():
    assert rmse([0.0, 1.0], [0.0, 0.0]) == pytest.approx(math.sqrt(0.5))


def test_shape_mismatch():
    with pytest.raises(ValueError, match="Shape mismatch"):
        rmse([1, 2], [1])


def test_empty_inputs():
    with pytest.raises(ValueError):
        spearman_correlation([], [])


def test_evaluate_ranking_keys():
    result = evaluate_ranking([0.1, 0.4, 0.8], [0.2, 0.3, 0.9], k=2)
    assert set(result) == {"spearman_rho", "p_value", "ndcg_at_2", "rmse"}


def test_check_targets_covers_every_configured_metric():
    metrics = {"spearman_rho": 0.6, "p_value": 0.01, "ndcg_at_5": 0.65, "rmse": 0.1}
    result = check_targets(metrics, {"spearman": 0.5, "ndcg_at_5": 0.7})
    assert result == {"spearman": True, "ndcg_at_5": False}


def test_check_targets_nan_not_met():
    assert check_targets({"spearman_rho": math.nan}, {"spearman": 0.5}) == {"spearman": False}


def test_check_targets_unknown_metric():
    with pytest.raises(ValueError):
        check_targets({"ndcg_at_3": 0.9}, {"ndcg_at_5": 0.7})
