# tests/test_config.py

"""
Settings Tests - defaults and cross-field validation
"""

import pytest
from pydantic import ValidationError

from expertise_cube.config import Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.API_PREFIX == "/api"
        assert settings.EVALUATION_MERGE_POLICY == "replace"
        assert settings.merge_weights == [0.3, 0.7]

    def test_weights_must_have_positive_total(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Settings(_env_file=None, PRIOR_SCORE_WEIGHT=0, EVALUATION_WEIGHT=0)

    def test_weight_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, EVALUATION_WEIGHT=1.5)

    def test_unknown_merge_policy_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, EVALUATION_MERGE_POLICY="average")

    def test_debug_forbidden_in_production(self):
        with pytest.raises(ValidationError, match="DEBUG"):
            Settings(_env_file=None, APP_ENV="production", DEBUG=True)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("EVALUATION_MERGE_POLICY", "weighted")
        monkeypatch.setenv("PRIOR_SCORE_WEIGHT", "0.5")
        settings = Settings(_env_file=None)
        assert settings.EVALUATION_MERGE_POLICY == "weighted"
        assert settings.merge_weights == [0.5, 0.7]
