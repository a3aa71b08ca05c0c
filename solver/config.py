from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "difficulty": "easy",
    "seed": None,
    "render": {"cell": 60},
}

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None keyword overrides."""
    cfg = DotDict({k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULT_CONFIG.items()})
    if path is not None:
        p = Path(path)
        if not p.exists():
            raise SystemExit(f"Config file not found: {p}")
        for k, v in load_yaml(p).items():
            if isinstance(v, dict) and isinstance(cfg.get(k), dict):
                cfg[k].update(v)
            elif v is not None:
                cfg[k] = v
    return DotDict(merge_overrides(cfg, **overrides))
