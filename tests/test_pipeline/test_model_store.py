"""Tests for model artifact load/save."""

import joblib
import pytest

from applicant_ranker.config import settings
from applicant_ranker.errors import ModelLoadError
from applicant_ranker.models.schemas.feature_vector import FEATURE_NAMES
from applicant_ranker.services.pipeline.model_store import ModelStore


class ConstantModel:
    def __init__(self, value=0.5):
        self.value = value

    def predict(self, X):
        return [self.value] * len(X)


def test_creates_directory(model_dir):
    store = ModelStore(model_dir)
    assert model_dir.is_dir()
    assert store.model_path == model_dir / "applicant_ranking_model.joblib"


def test_default_directory_from_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "model_dir", str(tmp_path / "configured"))
    store = ModelStore()
    assert store.model_dir == tmp_path / "configured"
    assert store.model_dir.is_dir()


def test_missing_artifact_returns_none(model_dir):
    store = ModelStore(model_dir)
    assert not store.exists()
    assert store.load() is None


def test_save_then_load(model_dir):
    store = ModelStore(model_dir)
    store.save(ConstantModel(0.7))
    loaded = store.load()
    assert loaded.predict([[0] * 5]) == [0.7]


def test_save_overwrites(model_dir):
    store = ModelStore(model_dir)
    store.save(ConstantModel(0.1))
    store.save(ConstantModel(0.9))
    assert store.load().value == 0.9
    assert [p.name for p in model_dir.iterdir()] == [store.model_path.name]


def test_corrupt_artifact_raises(model_dir):
    store = ModelStore(model_dir)
    store.model_path.write_bytes(b"this is not a pickle")
    with pytest.raises(ModelLoadError):
        store.load()


def test_foreign_object_raises(model_dir):
    store = ModelStore(model_dir)
    joblib.dump(["not", "an", "artifact"], store.model_path)
    with pytest.raises(ModelLoadError):
        store.load()


def test_column_order_mismatch_raises(model_dir):
    store = ModelStore(model_dir)
    joblib.dump(
        {"feature_names": list(reversed(FEATURE_NAMES)), "pipeline": ConstantModel()},
        store.model_path,
    )
    with pytest.raises(ModelLoadError, match="columns"):
        store.load()


def test_artifact_without_predictor_raises(model_dir):
    store = ModelStore(model_dir)
    joblib.dump({"feature_names": list(FEATURE_NAMES), "pipeline": "nope"}, store.model_path)
    with pytest.raises(ModelLoadError):
        store.load()
