"""Ranking engine: wires extraction, scoring and training together.

Flow:
    job_description + resumes
      ├─ extract_features()      → one FeatureVector per resume
      ├─ _select_scorer()        → ModelScorer if a model is loaded, else RuleBasedScorer
      │                            (chosen once per call, never mixed within a batch)
      └─ stable sort by score    → list[ScoreResult], best first
"""

import logging
import threading
from pathlib import Path
from typing import Any, Sequence

from applicant_ranker.models.requests import ResumeDocument
from applicant_ranker.models.responses import ScoreResult
from applicant_ranker.models.schemas.feature_vector import FeatureVector
from applicant_ranker.services.feature_extractor import extract_features
from applicant_ranker.services.pipeline.base import BaseScorer
from applicant_ranker.services.pipeline.model_scorer import ModelScorer
from applicant_ranker.services.pipeline.model_store import ModelStore
from applicant_ranker.services.pipeline.rule_scorer import RuleBasedScorer
from applicant_ranker.services.pipeline.trainer import fit_model

logger = logging.getLogger(__name__)


class ModelSlot:
    """Holds the current model; readers get a whole old or new model, never a partial one."""

    def __init__(self, model: Any | None = None) -> None:
        self._model = model
        self._lock = threading.Lock()

    def get(self) -> Any | None:
        with self._lock:
            return self._model

    def swap(self, model: Any | None) -> Any | None:
        with self._lock:
            previous, self._model = self._model, model
        return previous


class RankingEngine:
    def __init__(
        self,
        model_dir: str | Path | None = None,
        store: ModelStore | None = None,
        training_params: dict[str, Any] | None = None,
    ) -> None:
        self._store = store or ModelStore(model_dir)
        self._training_params = training_params
        self._rule_scorer = RuleBasedScorer()
        # ModelLoadError propagates: a broken artifact must not fall back to rules.
        self._slot = ModelSlot(self._store.load())
        self._train_lock = threading.Lock()

    @property
    def store(self) -> ModelStore:
        return self._store

    @property
    def is_model_loaded(self) -> bool:
        return self._slot.get() is not None

    @property
    def scoring_method(self) -> str:
        return self._select_scorer().scoring_method

    def _select_scorer(self) -> BaseScorer:
        model = self._slot.get()
        if model is None:
            return self._rule_scorer
        return ModelScorer(model)

    def extract(
        self, job_description: str, resumes: Sequence[ResumeDocument]
    ) -> list[FeatureVector]:
        return [extract_features(job_description, r) for r in resumes]

    def rank(
        self, job_description: str, resumes: Sequence[ResumeDocument]
    ) -> list[ScoreResult]:
        """Score every resume against the job and return results best-first.

        Ties keep their input order.
        """
        results = self.score(self.extract(job_description, resumes))
        return sorted(results, key=lambda r: r.score, reverse=True)

    def score(self, features: Sequence[FeatureVector]) -> list[ScoreResult]:
        """Score already-extracted vectors with the current path, in input order."""
        scorer = self._select_scorer()
        results = scorer.score_batch(features)
        logger.debug(
            "Scored %d candidates with %s scoring", len(results), scorer.scoring_method
        )
        return results

    def feature_importances(self) -> dict[str, float]:
        scorer = self._select_scorer()
        if isinstance(scorer, ModelScorer):
            return scorer.feature_importances()
        return {}

    def train(self, historical_data: Sequence[FeatureVector]) -> None:
        """Fit a new model on labeled vectors, persist it, then make it current.

        Invalid data raises TrainingDataError before anything is written.
        """
        with self._train_lock:
            model = fit_model(historical_data, self._training_params)
            path = self._store.save(model)
            self._slot.swap(model)
        logger.info("Model trained on %d examples and saved to %s", len(historical_data), path)
