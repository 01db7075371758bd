"""JSON file input and output for the brand extractor."""

import json
import logging
import os
from typing import Any, Dict, List

from ..errors import ConfigurationError
from ..types.brand import BrandConfig

logger = logging.getLogger(__name__)


def load_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Input file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Cannot parse {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e


def load_brand_config(path: str, strict: bool = False) -> BrandConfig:
    """Load the "brands to scrape" configuration.

    With ``strict`` set, rule sets using an unknown extract kind or a broken
    selector are rejected instead of silently producing null fields.
    """
    config = BrandConfig.from_dict(load_json(path))
    if strict:
        config.validate_rules()
    logger.debug(f"Loaded {len(config.endpoints)} endpoints and {len(config.rule_sets)} rule sets from {path}")
    return config


def load_known_brands(path: str) -> List[Dict[str, Any]]:
    data = load_json(path)
    if not isinstance(data, list):
        raise ConfigurationError(f"Known brands file {path} must contain a JSON list")
    return [b for b in data if isinstance(b, dict)]


def write_json(path: str, data: Any):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data, fh, ensure_ascii=False, indent=2)
    logger.debug(f"Wrote {path}")
