# scatterviz/api/demo/router.py
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from scatterviz.api.models import ChartOptionsRequest, DemoSceneSummary
from scatterviz.services.scatter_renderer import render_scatter_svg
from scatterviz.util.vega_util import VegaUtil

from .scenes import DEMO_SCENES, pick_scene

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/charts/demo", tags=["demo"])


def _scene_or_404(name: str) -> dict:
    scene = pick_scene(name)
    if scene is None:
        raise HTTPException(status_code=404, detail=f"Unknown demo scene: {name}")
    return scene


def _scene_options(scene: dict):
    return ChartOptionsRequest.model_validate(scene["options"]).to_chart_options()


@router.get("", response_model=list[DemoSceneSummary])
async def list_demo_scenes():
    return [
        DemoSceneSummary(
            name=name,
            title=scene["title"],
            plot_type=scene["options"].get("plot_type", "scatter"),
        )
        for name, scene in DEMO_SCENES.items()
    ]


@router.get("/{name}.svg")
async def demo_scene_svg(name: str):
    scene = _scene_or_404(name)
    logger.info(f"Rendering demo scene '{name}' as SVG")
    svg = render_scatter_svg(scene["data"], _scene_options(scene))
    return Response(content=svg, media_type="image/svg+xml")


@router.get("/{name}/vega")
async def demo_scene_vega(name: str):
    scene = _scene_or_404(name)
    logger.info(f"Rendering demo scene '{name}' as Vega-Lite")
    spec = VegaUtil.build_scatter_spec(scene["data"], _scene_options(scene))
    spec["description"] = scene["description"]
    return spec
