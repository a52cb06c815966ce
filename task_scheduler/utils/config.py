"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any, Optional


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    return data or {}


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'scoring': {
            'priority_weight': 10,
            'deadline_horizon_hours': 100,
        },
        'ranking': {
            'policy': 'urgency',  # urgency | deadline
        },
        'display': {
            'recommended_limit': 5,
            'datetime_format': '%Y-%m-%d %H:%M',
        },
        'sample': {
            'seed': 42,
            'task_count': 20,
            'deadline_range_days': 14,
            'dependency_probability': 0.3,
        },
        'storage': {
            'tasks_file': 'results/tasks.json',
        },
        'logging': {
            'level': 'INFO',
        },
    }


def merge_config(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a config file over the defaults, or return the defaults if it is absent."""
    defaults = get_default_config()
    if config_path and Path(config_path).exists():
        return merge_config(defaults, load_config(config_path))
    return defaults
