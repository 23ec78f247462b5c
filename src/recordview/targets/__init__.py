"""Serialization targets for projected maps."""

from recordview.targets.base import ProjectionTarget
from recordview.targets.json_target import JsonTarget
from recordview.targets.yaml_target import YamlTarget

__all__ = ["JsonTarget", "ProjectionTarget", "YamlTarget"]
