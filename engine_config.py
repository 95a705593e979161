"""
Engine configuration loaded from YAML.

Example:

    algorithm: bellman-ford
    bellman_ford:
      early_exit: true
    log_level: INFO

Every key is optional.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

ALGORITHMS = ("dijkstra", "bellman-ford")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineConfig:
    algorithm: str = "dijkstra"
    bellman_ford_early_exit: bool = True
    log_level: str = "WARNING"


def parse_config(data: Mapping[str, Any] | None) -> EngineConfig:
    """Validate a decoded YAML mapping and build an EngineConfig."""
    if data is None:
        return EngineConfig()
    if not isinstance(data, Mapping):
        raise ValueError("Engine config must be a mapping at the top level.")

    algorithm = str(data.get("algorithm", "dijkstra"))
    if algorithm not in ALGORITHMS:
        raise ValueError(
            f"Unknown algorithm '{algorithm}'; expected one of {', '.join(ALGORITHMS)}."
        )

    bf = data.get("bellman_ford")
    if bf is None:
        bf = {}
    if not isinstance(bf, Mapping):
        raise ValueError("'bellman_ford' must be a mapping.")
    early_exit = bf.get("early_exit", True)
    if not isinstance(early_exit, bool):
        raise ValueError("'bellman_ford.early_exit' must be true or false.")

    log_level = str(data.get("log_level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{log_level}'; expected one of {', '.join(LOG_LEVELS)}."
        )

    return EngineConfig(
        algorithm=algorithm,
        bellman_ford_early_exit=early_exit,
        log_level=log_level,
    )


def load_config(path: Path) -> EngineConfig:
    import yaml  # type: ignore

    return parse_config(yaml.safe_load(Path(path).read_text()))
