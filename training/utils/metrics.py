"""Regression and ranking metrics for evaluating the applicant ranking model.

All public functions accept plain Python lists or NumPy arrays and return
simple Python scalars or dicts so they can be logged directly by the
training script.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Sequence, Union

import numpy as np
from scipy.stats import spearmanr

logger = logging.getLogger(__name__)

_ArrayLike = Union[Sequence[float], "np.ndarray"]


def _as_pair(y_true: _ArrayLike, y_pred: _ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    y_true_arr = np.asarray(y_true, dtype=np.float64)
    y_pred_arr = np.asarray(y_pred, dtype=np.float64)

    if y_true_arr.shape != y_pred_arr.shape:
        raise ValueError(
            f"Shape mismatch: {y_true_arr.shape} vs {y_pred_arr.shape}"
        )
    if y_true_arr.size == 0:
        raise ValueError("Inputs must not be empty")
    return y_true_arr, y_pred_arr


def spearman_correlation(
    y_true: _ArrayLike,
    y_pred: _ArrayLike,
) -> Dict[str, float]:
    """Compute Spearman rank-order correlation between two score vectors.

    Parameters
    ----------
    y_true:
        Ground-truth labels.
    y_pred:
        Predicted scores with the same length.

    Returns
    -------
    dict
        ``{"spearman_rho": float, "p_value": float}``.  Both are NaN when
        either input is constant.

    Raises
    ------
    ValueError
        If the input lengths do not match or are empty.
    """
    y_true_arr, y_pred_arr = _as_pair(y_true, y_pred)
    rho, p_value = spearmanr(y_true_arr, y_pred_arr)
    return {"spearman_rho": float(rho), "p_value": float(p_value)}


def ndcg_at_k(
    y_true: _ArrayLike,
    y_pred: _ArrayLike,
    k: int = 5,
) -> float:
    """Compute Normalised Discounted Cumulative Gain at rank *k*.

    Items are ranked by *y_pred* in descending order and relevance is taken
    from the corresponding *y_true* values.

    Returns 0.0 when the ideal DCG is zero (all true relevances are zero).

    Raises
    ------
    ValueError
        If inputs are empty, have different lengths, or *k* < 1.
    """
    y_true_arr, y_pred_arr = _as_pair(y_true, y_pred)
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    def _dcg(relevances: np.ndarray, topk: int) -> float:
        relevances = relevances[:topk]
        discounts = np.log2(np.arange(2, len(relevances) + 2))
        return float(np.sum(relevances / discounts))

    # Stable descending order so tied predictions keep their input order.
    ranked_indices = np.argsort(-y_pred_arr, kind="stable")
    dcg = _dcg(y_true_arr[ranked_indices], k)

    idcg = _dcg(np.sort(y_true_arr)[::-1], k)
    if idcg == 0.0:
        return 0.0
    return dcg / idcg


def rmse(y_true: _ArrayLike, y_pred: _ArrayLike) -> float:
    y_true_arr, y_pred_arr = _as_pair(y_true, y_pred)
    return float(math.sqrt(np.mean((y_true_arr - y_pred_arr) ** 2)))


def evaluate_ranking(
    y_true: _ArrayLike,
    y_pred: _ArrayLike,
    k: int = 5,
) -> Dict[str, float]:
    """Spearman rho, NDCG@k and RMSE in one dict."""
    result = spearman_correlation(y_true, y_pred)
    result[f"ndcg_at_{k}"] = ndcg_at_k(y_true, y_pred, k=k)
    result["rmse"] = rmse(y_true, y_pred)
    return result


# Config target names that differ from the metric keys they check.
_TARGET_ALIASES = {"spearman": "spearman_rho"}


def check_targets(
    metrics: Dict[str, float],
    targets: Dict[str, float],
) -> Dict[str, bool]:
    """Compare metrics against minimum targets, e.g. ``{"spearman": 0.5, "ndcg_at_5": 0.7}``.

    Returns ``{target_name: met}``. NaN metrics never meet a target.

    Raises
    ------
    ValueError
        If a target names a metric that was not computed.
    """
    results: Dict[str, bool] = {}
    for name, threshold in targets.items():
        key = _TARGET_ALIASES.get(name, name)
        if key not in metrics:
            raise ValueError(f"Unknown metric for target {name!r}")
        results[name] = bool(metrics[key] >= threshold)
    return results
