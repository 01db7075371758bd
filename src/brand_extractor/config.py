import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from .errors import ConfigurationError
from .types.brand import FilterMissPolicy

load_dotenv()


DEFAULT_TRANSFORMER_URL = "http://localhost:14080/content-transformer"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; brand-extractor/1.0)"


def _as_bool(val: Optional[str], default: bool = False) -> bool:
    if val is None:
        return default
    return str(val).lower() in {"1", "true", "yes", "y", "on"}


@dataclass
class Settings:
    # Input and output artifacts
    brands_file: str = "BrandExtractor.json"
    known_file: str = "fromTrig.json"
    processed_file: str = "processed.json"
    failures_file: str = "failures.json"

    # Content transformer service
    transformer_url: str = DEFAULT_TRANSFORMER_URL
    # Legacy consumers expect the transformer output read as single-byte latin-1
    transformer_encoding: str = "iso-8859-1"
    transformer_timeout: float = 30.0

    # Page fetching
    fetch_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    # Batch behaviour
    max_workers: int = 1  # 1 keeps endpoints strictly sequential
    strict_rules: bool = False
    filter_miss_policy: FilterMissPolicy = FilterMissPolicy.NULL

    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        try:
            return cls._from_environ()
        except ValueError as e:
            raise ConfigurationError(f"Invalid BRANDS_* environment setting: {e}") from e

    @classmethod
    def _from_environ(cls) -> "Settings":
        return cls(
            brands_file=os.environ.get("BRANDS_CONFIG_FILE", "BrandExtractor.json"),
            known_file=os.environ.get("BRANDS_KNOWN_FILE", "fromTrig.json"),
            processed_file=os.environ.get("BRANDS_PROCESSED_FILE", "processed.json"),
            failures_file=os.environ.get("BRANDS_FAILURES_FILE", "failures.json"),
            transformer_url=os.environ.get("BRANDS_TRANSFORMER_URL", DEFAULT_TRANSFORMER_URL),
            transformer_encoding=os.environ.get("BRANDS_TRANSFORMER_ENCODING", "iso-8859-1"),
            transformer_timeout=float(os.environ.get("BRANDS_TRANSFORMER_TIMEOUT", "30")),
            fetch_timeout=float(os.environ.get("BRANDS_FETCH_TIMEOUT", "30")),
            user_agent=os.environ.get("BRANDS_USER_AGENT", DEFAULT_USER_AGENT),
            max_workers=int(os.environ.get("BRANDS_MAX_WORKERS", "1")),
            strict_rules=_as_bool(os.environ.get("BRANDS_STRICT_RULES"), False),
            filter_miss_policy=FilterMissPolicy(
                os.environ.get("BRANDS_FILTER_MISS", FilterMissPolicy.NULL.value).lower()
            ),
            debug=_as_bool(os.environ.get("BRANDS_DEBUG"), False),
        )
