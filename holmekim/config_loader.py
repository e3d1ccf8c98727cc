"""Загрузка параметров прогона из YAML

Ключи в snake_case или в старом стиле (netSize, seedSize, seedType, k_ave).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .config import GrowthConfig, SeedType, parse_seed_type, settings
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_ALIASES = {
    "netSize": "net_size",
    "N": "net_size",
    "seed": "randseed",
    "seedSize": "seed_size",
    "seedType": "seed_type",
    "kAve": "k_ave",
}
_FIELDS = ("net_size", "randseed", "m", "pt", "seed_size", "seed_type", "k_ave")
_REQUIRED = ("net_size", "m", "pt", "seed_size")


def config_from_mapping(data: Mapping[str, Any]) -> GrowthConfig:
    params: Dict[str, Any] = {}
    for key, val in dict(data).items():
        name = _ALIASES.get(str(key), str(key))
        if name not in _FIELDS:
            raise ConfigurationError(f"unknown config key {key!r}")
        if name in params:
            raise ConfigurationError(f"config key {name!r} given twice")
        params[name] = val
    missing = [k for k in _REQUIRED if k not in params]
    if missing:
        raise ConfigurationError(f"missing config keys: {missing}")
    params.setdefault("randseed", settings.DEFAULT_SEED)
    params["seed_type"] = parse_seed_type(params.get("seed_type", settings.DEFAULT_SEED_TYPE))
    if "k_ave" not in params:
        if params["seed_type"] is SeedType.RANDOM:
            logger.warning("Average degree not given for the random seed, using k_ave=%g", settings.DEFAULT_K_AVE)
        params["k_ave"] = settings.DEFAULT_K_AVE
    return GrowthConfig(**params)


def load_growth_config(path: str | Path) -> GrowthConfig:
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"config file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file must hold a mapping, got {type(data).__name__}")
    # ожидаем либо плоский словарь, либо {"holme_kim": {...}}
    if "holme_kim" in data and isinstance(data["holme_kim"], dict):
        data = data["holme_kim"]
    return config_from_mapping(data)
