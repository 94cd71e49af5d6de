"""Two-level extractor config validation: syntactic, semantic.

Syntactic = structure and types (like a compiler).
Semantic  = cross-field consistency and references to files on disk.
"""

from __future__ import annotations

import json
from pathlib import Path

KNOWN_FIELDS = {
    "top_n",
    "min_token_length",
    "stop_words_path",
    "extra_stop_words",
    "collapse_subsets",
}


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


# ── Syntactic Validation ────────────────────────────────────────────

def validate_syntactic(config: dict) -> list[str]:
    """Check field names and types.  Returns list of error strings."""
    errors: list[str] = []

    if not isinstance(config, dict):
        return ["Config must be a JSON object."]

    unknown = sorted(set(config) - KNOWN_FIELDS)
    if unknown:
        errors.append(f"Unknown config fields: {unknown}. Known fields: {sorted(KNOWN_FIELDS)}.")

    if "top_n" in config and not _is_positive_int(config["top_n"]):
        errors.append("'top_n' must be a positive integer.")

    if "min_token_length" in config and not _is_positive_int(config["min_token_length"]):
        errors.append("'min_token_length' must be a positive integer.")

    path = config.get("stop_words_path")
    if path is not None and (not isinstance(path, str) or not path):
        errors.append("'stop_words_path' must be a non-empty string if provided.")

    extra = config.get("extra_stop_words")
    if extra is not None:
        if not isinstance(extra, list) or not all(isinstance(w, str) for w in extra):
            errors.append("'extra_stop_words' must be a list of strings.")

    collapse = config.get("collapse_subsets")
    if collapse is not None and not isinstance(collapse, bool):
        errors.append("'collapse_subsets' must be a boolean.")

    return errors


# ── Semantic Validation ─────────────────────────────────────────────

def validate_semantic(config: dict, base_dir: Path | None = None) -> list[str]:
    """Check that referenced files exist and word lists are usable."""
    errors: list[str] = []

    path = config.get("stop_words_path")
    if path:
        resolved = Path(path)
        if base_dir is not None and not resolved.is_absolute():
            resolved = base_dir / resolved
        if not resolved.is_file():
            errors.append(f"Stop-word file not found: {path}")

    for word in config.get("extra_stop_words") or []:
        if not word.strip() or " " in word.strip():
            errors.append(
                f"'extra_stop_words' entry {word!r} must be a single word. "
                "Stop words are matched word by word, so phrases never match."
            )

    return errors


def validate_dict(config: dict, base_dir: Path | None = None) -> list[str]:
    syn_errors = validate_syntactic(config)
    if syn_errors:
        return syn_errors
    return validate_semantic(config, base_dir)


# ── Top-level validate ──────────────────────────────────────────────

def validate_config(config_path: str) -> tuple[bool, list[str]]:
    """Run syntactic + semantic validation on a config file.

    Returns (passed, errors).  Relative stop-word paths resolve against
    the config file's directory.
    """
    path = Path(config_path)
    try:
        config = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        return False, [f"Invalid JSON: {e}"]
    except FileNotFoundError:
        return False, [f"Config file not found: {config_path}"]

    errors = validate_dict(config, path.parent)
    return not errors, errors
