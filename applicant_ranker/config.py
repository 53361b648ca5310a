import os
from pydantic_settings import BaseSettings


def _default_model_dir() -> str:
    """Platform application-data directory for the ranking model artifact."""
    appdata = os.environ.get("APPDATA")
    if appdata:
        return os.path.join(appdata, "ATS", "Models")
    data_home = os.environ.get("XDG_DATA_HOME") or os.path.join(
        os.path.expanduser("~"), ".local", "share"
    )
    return os.path.join(data_home, "ATS", "Models")


class Settings(BaseSettings):
    model_dir: str = ""  # empty -> platform default (see default_model_dir)
    model_filename: str = "applicant_ranking_model.joblib"
    log_level: str = "INFO"

    # Gradient-boosted regressor settings used by train()
    num_leaves: int = 20
    n_estimators: int = 100
    min_child_samples: int = 10
    learning_rate: float = 0.2
    random_state: int = 0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "RANKER_",
        "protected_namespaces": ("settings_",),
    }

    def default_model_dir(self) -> str:
        return self.model_dir or _default_model_dir()

    def training_params(self) -> dict[str, float | int]:
        return {
            "num_leaves": self.num_leaves,
            "n_estimators": self.n_estimators,
            "min_child_samples": self.min_child_samples,
            "learning_rate": self.learning_rate,
            "random_state": self.random_state,
        }


settings = Settings()
