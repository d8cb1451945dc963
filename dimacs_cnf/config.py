"""
Reader configuration backed by OmegaConf.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from omegaconf import DictConfig, OmegaConf


@dataclass
class ReaderConfig:
    """Options for FormulaBuilder and load_cnf."""
    accepted_formats: List[str] = field(default_factory=lambda: ["cnf"])
    keep_comments: bool = False
    check_bounds: bool = False
    encoding: str = "utf-8"


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Iterable[str] = (),
) -> DictConfig:
    """
    Build a typed reader config.

    Args:
        path: Optional YAML file; its keys are merged over the defaults.
        overrides: Dotlist overrides, e.g. ["keep_comments=true"].

    Returns:
        DictConfig validated against ReaderConfig.
    """
    cfg = OmegaConf.structured(ReaderConfig)
    if path is not None:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(path))
    overrides = list(overrides)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(overrides))
    return cfg
