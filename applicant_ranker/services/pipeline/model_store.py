"""Load/save of the trained ranking model artifact.

The artifact is a single joblib file holding the fitted pipeline together
with the feature column order it was trained on.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import joblib

from applicant_ranker.config import settings
from applicant_ranker.errors import ModelLoadError
from applicant_ranker.models.schemas.feature_vector import FEATURE_NAMES

logger = logging.getLogger(__name__)


class ModelStore:
    def __init__(self, model_dir: str | Path | None = None, filename: str | None = None) -> None:
        self.model_dir = Path(model_dir or settings.default_model_dir())
        self.model_dir.mkdir(parents=True, exist_ok=True)
        self.model_path = self.model_dir / (filename or settings.model_filename)

    def exists(self) -> bool:
        return self.model_path.is_file()

    def load(self) -> Any | None:
        """Return the stored model, or None if nothing has been trained yet.

        Raises ModelLoadError if the file exists but is not a usable artifact.
        """
        if not self.exists():
            logger.info("No existing model found, using rule-based scoring")
            logger.info("Train a model to create: %s", self.model_path)
            return None

        try:
            artifact = joblib.load(self.model_path)
        except Exception as e:
            logger.error("Failed to load model from %s: %s", self.model_path, e)
            raise ModelLoadError(f"Cannot read model artifact {self.model_path}: {e}") from e

        if not isinstance(artifact, dict) or "pipeline" not in artifact:
            raise ModelLoadError(f"{self.model_path} is not a ranking model artifact")

        feature_names = artifact.get("feature_names")
        if list(feature_names or []) != FEATURE_NAMES:
            raise ModelLoadError(
                f"{self.model_path} was trained on columns {feature_names}, expected {FEATURE_NAMES}"
            )

        model = artifact["pipeline"]
        if not callable(getattr(model, "predict", None)):
            raise ModelLoadError(f"{self.model_path} does not contain a predictor")

        logger.info("Model loaded from %s", self.model_path)
        return model

    def save(self, model: Any) -> Path:
        """Write the artifact, replacing any previous one only once fully written."""
        artifact = {"feature_names": list(FEATURE_NAMES), "pipeline": model}
        fd, tmp_name = tempfile.mkstemp(
            dir=self.model_dir, prefix=self.model_path.name, suffix=".tmp"
        )
        os.close(fd)
        try:
            joblib.dump(artifact, tmp_name)
            os.replace(tmp_name, self.model_path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Model saved to %s", self.model_path)
        return self.model_path
