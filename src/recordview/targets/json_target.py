"""JsonTarget -- serialize projected maps to a JSON string."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from recordview.targets._serialize import to_plain


@dataclass
class JsonTarget:
    """Serialize projected maps to JSON.

    Implements the ProjectionTarget[str] protocol.
    """

    indent: int | None = 2
    sort_keys: bool = False

    def serialize(self, projected: Any) -> str:
        return json.dumps(
            to_plain(projected),
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=False,
        )
