"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import S5CidConfig


def load_config(cli_path: str | None = None) -> S5CidConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./s5cid.yaml"),
        Path.home() / ".s5cid" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return S5CidConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return S5CidConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `s5cid config init`
DEFAULT_CONFIG_TEMPLATE = """\
# s5cid.yaml

# Multibase form used when printing new CIDs
default_prefix: "z"            # z (base58btc) | u (base64url) | b (base32)

# Upper bound on the size field of packed CIDs
max_size_bytes: 16

# Read size for streaming BLAKE3 file hashing
hash_chunk_size: 1048576

# Portal used to build subdomain URLs
portal_url: "http://127.0.0.1:5522"   # ${VAR} references are expanded

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
