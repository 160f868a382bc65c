from __future__ import annotations

import json
from typing import Any


def dumps(obj: Any) -> str:
    """
    JSON for CLI responses: compact, ensure_ascii=False, trailing newline
    is left to the caller.
    """
    return json.dumps(obj, ensure_ascii=False)
