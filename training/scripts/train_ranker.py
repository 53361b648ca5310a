"""Train the applicant ranking model (LightGBM regressor over 5 lexical features).

Loads labeled resume-JD pairs, extracts features with the serving-time
extractor, trains through RankingEngine.train (which persists the artifact),
and evaluates on a hold-out split.

Usage:
    python training/scripts/train_ranker.py [--config training/configs/ranker.yaml] [--data PATH]
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def load_config(path: str) -> dict:
    with open(path) as f:
        return yaml.safe_load(f)


def main(config_path: str = "training/configs/ranker.yaml", data_path: str | None = None) -> int:
    config = load_config(config_path)
    logger.info("Training ranking model with config: %s", config["model"]["name"])

    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
    from data_prep.ranker_data import build_feature_vectors, load_labeled_pairs, split_records
    from utils.metrics import check_targets, evaluate_ranking

    from applicant_ranker.errors import RankerError
    from applicant_ranker.services.pipeline.engine import RankingEngine

    # --- 1. Load data ---
    data_cfg = config.get("data", {})
    pairs = load_labeled_pairs(data_path or data_cfg["path"])
    records = build_feature_vectors(pairs)
    train_set, test_set = split_records(
        records,
        test_fraction=data_cfg.get("test_fraction", 0.2),
        seed=data_cfg.get("seed", 42),
    )
    logger.info("Train: %d, Test: %d", len(train_set), len(test_set))

    # --- 2. Train (persists the artifact on success) ---
    engine = RankingEngine(
        model_dir=config.get("output", {}).get("model_dir") or None,
        training_params=config["model"].get("params"),
    )
    try:
        engine.train(train_set)
    except RankerError:
        logger.exception("Training failed -- previous model left in place.")
        return 1

    # --- 3. Evaluate ---
    if len(test_set) < 2:
        logger.warning("Hold-out split too small to evaluate (%d examples).", len(test_set))
        return 0

    preds = [r.score / 100.0 for r in engine.score(test_set)]
    labels = [fv.label for fv in test_set]

    eval_cfg = config.get("evaluation", {})
    k = eval_cfg.get("k", 5)
    metrics = evaluate_ranking(labels, preds, k=k)
    logger.info("Spearman correlation: %.4f (p=%.6f)", metrics["spearman_rho"], metrics["p_value"])
    logger.info("NDCG@%d: %.4f", k, metrics[f"ndcg_at_{k}"])
    logger.info("RMSE: %.4f", metrics["rmse"])

    targets = eval_cfg.get("targets", {})
    for name, met in check_targets(metrics, targets).items():
        if met:
            logger.info("%s target %.2f ACHIEVED", name, targets[name])
        else:
            logger.warning("%s target %.2f NOT MET", name, targets[name])

    logger.info("Feature importances:")
    for name, val in sorted(engine.feature_importances().items(), key=lambda x: -x[1]):
        logger.info("  %s: %.2f", name, val)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Train the applicant ranking model")
    parser.add_argument("--config", default="training/configs/ranker.yaml")
    parser.add_argument("--data", default=None, help="Override data.path from the config")
    args = parser.parse_args()
    sys.exit(main(args.config, args.data))
