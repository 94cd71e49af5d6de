"""Extractor settings, loaded from an optional JSON config file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from extraction.errors import InvalidArgumentError
from extraction.stopwords import STOP_WORDS, load_stop_words
from extraction.validator import validate_dict

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 7


@dataclass
class ExtractorConfig:
    top_n: int = DEFAULT_TOP_N
    min_token_length: int = 2
    stop_words_path: str | None = None
    extra_stop_words: list[str] = field(default_factory=list)
    collapse_subsets: bool = False
    _stop_words: frozenset[str] | None = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict, base_dir: Path | None = None) -> ExtractorConfig:
        errors = validate_dict(data, base_dir)
        if errors:
            raise InvalidArgumentError("Invalid config: " + " ".join(errors))

        path = data.get("stop_words_path")
        if path and base_dir is not None and not Path(path).is_absolute():
            path = str(base_dir / path)

        return cls(
            top_n=data.get("top_n", DEFAULT_TOP_N),
            min_token_length=data.get("min_token_length", 2),
            stop_words_path=path,
            extra_stop_words=list(data.get("extra_stop_words") or []),
            collapse_subsets=bool(data.get("collapse_subsets")),
        )

    @property
    def stop_words(self) -> frozenset[str]:
        """Active stop-word set, read from disk at most once."""
        if self._stop_words is None:
            if self.stop_words_path:
                self._stop_words = load_stop_words(self.stop_words_path, self.extra_stop_words)
            elif self.extra_stop_words:
                self._stop_words = STOP_WORDS | {w.lower() for w in self.extra_stop_words}
            else:
                self._stop_words = STOP_WORDS
        return self._stop_words


def load_config(config_path: str) -> ExtractorConfig:
    path = Path(config_path)
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Invalid JSON in {config_path}: {e}") from e
    except FileNotFoundError as e:
        raise InvalidArgumentError(f"Config file not found: {config_path}") from e

    config = ExtractorConfig.from_dict(data, path.parent)
    logger.debug("Loaded config from %s: %s", config_path, config)
    return config
