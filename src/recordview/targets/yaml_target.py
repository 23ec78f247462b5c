"""YamlTarget -- serialize projected maps to a YAML string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from recordview.targets._serialize import to_plain


@dataclass
class YamlTarget:
    """Serialize projected maps to block-style YAML, preserving key order.

    Implements the ProjectionTarget[str] protocol.
    """

    def serialize(self, projected: Any) -> str:
        return yaml.safe_dump(
            to_plain(projected),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
