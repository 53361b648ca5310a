#!/usr/bin/env python3
"""Ranking Model Data Preparation: labeled resume-JD pairs -> feature vectors.

Reads historical hiring outcomes (one row per application) and turns each
row into a labeled FeatureVector with the same extractor used at ranking
time, so training and inference see identical features.

Input columns:
    job_description, resume_text, label  (required)
    candidate_id                         (optional)

Labels are expected on a 0-1 scale; the model score is the prediction x 100.
Supported formats: .csv, .jsonl, .json, .parquet
"""

from __future__ import annotations

import logging
import math
import random
from pathlib import Path
from typing import Sequence

import pandas as pd

from applicant_ranker.models.requests import LabeledPair, ResumeDocument
from applicant_ranker.models.schemas.feature_vector import FeatureVector
from applicant_ranker.services.feature_extractor import extract_features

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("job_description", "resume_text", "label")


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix == ".jsonl":
        return pd.read_json(path, lines=True)
    if suffix == ".json":
        return pd.read_json(path)
    if suffix == ".parquet":
        return pd.read_parquet(path)
    raise ValueError(f"Unsupported training data format: {path.name}")


def _text(value: object) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value)


def load_labeled_pairs(path: str | Path) -> list[LabeledPair]:
    """Load labeled pairs, skipping rows whose label is missing or not numeric."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Training data not found at {path}")

    df = _read_table(path)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing columns {missing}; got {df.columns.tolist()}")

    pairs: list[LabeledPair] = []
    skipped = 0
    for idx, row in df.iterrows():
        try:
            label = float(row["label"])
        except (ValueError, TypeError):
            skipped += 1
            continue
        if not math.isfinite(label):
            skipped += 1
            continue

        candidate_id = _text(row.get("candidate_id")) or f"row-{idx}"
        pairs.append(LabeledPair(
            job_description=_text(row["job_description"]),
            resume_text=_text(row["resume_text"]),
            label=label,
            candidate_id=candidate_id,
        ))

    if skipped:
        logger.warning("%s: skipped %d rows without a usable label.", path.name, skipped)
    logger.info("%s: loaded %d labeled pairs.", path.name, len(pairs))
    return pairs


def build_feature_vectors(pairs: Sequence[LabeledPair]) -> list[FeatureVector]:
    """Extract features for each pair and attach its label."""
    records: list[FeatureVector] = []
    for pair in pairs:
        resume = ResumeDocument(candidate_id=pair.candidate_id, text=pair.resume_text)
        fv = extract_features(pair.job_description, resume)
        records.append(fv.model_copy(update={"label": pair.label}))
    return records


def split_records(
    records: Sequence[FeatureVector],
    test_fraction: float = 0.2,
    seed: int = 42,
) -> tuple[list[FeatureVector], list[FeatureVector]]:
    """Shuffle and split into (train, test). The test split may be empty."""
    if not 0.0 <= test_fraction < 1.0:
        raise ValueError(f"test_fraction must be in [0, 1), got {test_fraction}")

    shuffled = list(records)
    random.Random(seed).shuffle(shuffled)
    n_test = int(len(shuffled) * test_fraction)
    return shuffled[n_test:], shuffled[:n_test]
