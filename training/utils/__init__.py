"""Training utility package -- evaluation metrics for the ranking model."""

from .metrics import (
    check_targets,
    evaluate_ranking,
    ndcg_at_k,
    rmse,
    spearman_correlation,
)

__all__ = [
    "spearman_correlation",
    "ndcg_at_k",
    "rmse",
    "evaluate_ranking",
    "check_targets",
]
