# scatterviz/api/demo/scenes/__init__.py
from __future__ import annotations

from typing import Optional, Dict, Any

from .charts import CHART_SCENES

DEMO_SCENES: Dict[str, Dict[str, Any]] = {
    **CHART_SCENES,
}

def pick_scene(name: str) -> Optional[dict]:
    key = (name or "").strip().lower()
    return DEMO_SCENES.get(key)
