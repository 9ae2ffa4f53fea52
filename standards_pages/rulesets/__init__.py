"""Ruleset loading and the typed configuration tree."""

from .loader import Ruleset, load_config_tree, load_ruleset, load_rulesets
from .tree import ConfigNode

__all__ = [
    "ConfigNode",
    "Ruleset",
    "load_config_tree",
    "load_ruleset",
    "load_rulesets",
]
