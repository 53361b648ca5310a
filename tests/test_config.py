import os

from applicant_ranker.config import Settings


def test_env_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("RANKER_MODEL_DIR", str(tmp_path))
    monkeypatch.setenv("RANKER_N_ESTIMATORS", "42")
    s = Settings()
    assert s.default_model_dir() == str(tmp_path)
    assert s.training_params()["n_estimators"] == 42


def test_default_model_dir_windows_appdata(monkeypatch, tmp_path):
    monkeypatch.delenv("RANKER_MODEL_DIR", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert Settings().default_model_dir() == os.path.join(str(tmp_path), "ATS", "Models")


def test_default_model_dir_xdg(monkeypatch, tmp_path):
    monkeypatch.delenv("RANKER_MODEL_DIR", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert Settings().default_model_dir() == os.path.join(str(tmp_path), "ATS", "Models")


def test_training_defaults():
    params = Settings().training_params()
    assert params["num_leaves"] == 20
    assert params["min_child_samples"] == 10


def test_only_used_settings_declared():
    assert set(Settings.model_fields) == {
        "model_dir",
        "model_filename",
        "log_level",
        "num_leaves",
        "n_estimators",
        "min_child_samples",
        "learning_rate",
        "random_state",
    }
