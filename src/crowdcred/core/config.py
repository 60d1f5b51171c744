# src/crowdcred/core/config.py

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, SecretStr, model_validator

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")


class SerpApiConfig(BaseModel):
    enabled: bool = True
    api_key: SecretStr = Field(default=SecretStr(""))
    base_url: str = "https://serpapi.com/search.json"
    country: str = "in"
    language: str = "en"
    timeout_seconds: float = Field(default=5.0, gt=0)
    max_retries: int = Field(default=2, ge=0)
    mock_mode: bool = False


class ScoringConfig(BaseModel):
    base_score: int = 20
    evaluator_timeout_seconds: float = Field(default=8.0, gt=0)
    max_workers: int = Field(default=6, ge=1)
    verified_threshold: int = Field(default=70, ge=0, le=100)
    unverified_threshold: int = Field(default=40, ge=0, le=100)

    @model_validator(mode="after")
    def check_thresholds(self) -> "ScoringConfig":
        if self.unverified_threshold > self.verified_threshold:
            raise ValueError(
                "unverified_threshold must not exceed verified_threshold"
            )
        return self


class ReputationConfig(BaseModel):
    default_bonus: float = Field(default=3.0, ge=0, le=5)


class CrowdCredConfig(BaseModel):
    """
    Main configuration model for CrowdCred.

    Passed explicitly to the scoring pipeline; nothing in the engine reads
    the process environment.
    """

    serpapi: SerpApiConfig = Field(default_factory=SerpApiConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    reputation: ReputationConfig = Field(default_factory=ReputationConfig)


def apply_env_overrides(serpapi_data: Any) -> Dict[str, Any]:
    """
    Override SerpApi values from a config file with environment variables.

    Only called by load_config; configuration built in code is never
    touched by the environment.

    Args:
        serpapi_data: Raw ``serpapi`` section from the YAML file (may be missing)

    Returns:
        New dict with SERPAPI_KEY, SERPAPI_ENABLED and SERPAPI_MOCK_MODE applied.
    """
    v = dict(serpapi_data) if isinstance(serpapi_data, dict) else {}

    if "SERPAPI_KEY" in os.environ:
        v["api_key"] = os.environ["SERPAPI_KEY"]
    if "SERPAPI_ENABLED" in os.environ:
        v["enabled"] = os.environ["SERPAPI_ENABLED"].lower() in _TRUTHY
    if "SERPAPI_MOCK_MODE" in os.environ:
        v["mock_mode"] = os.environ["SERPAPI_MOCK_MODE"].lower() in _TRUTHY

    return v


def load_config(config_path: Optional[Union[str, Path]] = None) -> CrowdCredConfig:
    """
    Load CrowdCred configuration from YAML file.

    Args:
        config_path: Path to config.yaml (default: ./config/config.yaml)

    Returns:
        Validated CrowdCredConfig instance.
    """
    if config_path is None:
        config_path = Path("config") / "config.yaml"
    else:
        config_path = Path(config_path)

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
            logger.info(f"Loaded configuration from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config file {config_path}: {e}")
    else:
        logger.info(f"Config file not found at {config_path}, using defaults")

    # Env vars override file values
    config_data["serpapi"] = apply_env_overrides(config_data.get("serpapi"))
    config = CrowdCredConfig(**config_data)

    logger.debug("CrowdCred configuration loaded with settings:")
    logger.debug(f"  SerpApi enabled: {config.serpapi.enabled}")
    logger.debug(f"  SerpApi mock mode: {config.serpapi.mock_mode}")
    logger.debug(f"  SerpApi key configured: {bool(config.serpapi.api_key.get_secret_value())}")
    logger.debug(
        f"  Scoring: base={config.scoring.base_score}, "
        f"timeout={config.scoring.evaluator_timeout_seconds}s"
    )

    return config
