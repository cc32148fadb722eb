from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from quant_stochastics.sde.errors import ConfigurationError
from quant_stochastics.sde.schemas import SimulationConfig

LOGGER = logging.getLogger(__name__)


def load_simulation_config(path: str | Path) -> SimulationConfig:
    """
    Load a SimulationConfig from YAML or JSON.

    Automatically validates using Pydantic v2.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    text = path.read_text()

    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            raw = yaml.safe_load(text)
        elif path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raise ValueError("Config path must be YAML or JSON.")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Failed to parse config: {e}") from e

    try:
        cfg = SimulationConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid SimulationConfig: {e}") from e

    LOGGER.debug("Loaded simulation config from %s: %s", path, cfg)
    return cfg
