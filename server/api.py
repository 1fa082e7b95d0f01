"""FastAPI server exposing the closet, laundry, wear log and suggestion endpoints."""

from dataclasses import asdict
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException

from closet_app.app import WardrobeApp
from closet_app.logging_config import configure_logging
from logic.validation import (
    GarmentCreate,
    GarmentUpdate,
    LaundryRequest,
    SuggestionRequest,
    WearLogRequest,
)
from tools.wardrobe_store import GarmentNotFoundError

configure_logging()

app = FastAPI(title="Closet Outfit Recommender", version="0.1.0")


@lru_cache(maxsize=1)
def get_closet() -> WardrobeApp:
    """Build the app on first use so importing this module has no side effects."""

    return WardrobeApp()


@app.get("/healthz")
async def healthcheck(closet: WardrobeApp = Depends(get_closet)) -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "closet-recommender",
        "environment": closet.config.environment or "local",
    }


@app.get("/garments")
def list_garments(closet: WardrobeApp = Depends(get_closet)) -> list:
    return closet.wardrobe_tools.list_garments()


@app.post("/garments", status_code=201)
def add_garment(request: GarmentCreate, closet: WardrobeApp = Depends(get_closet)) -> dict:
    return closet.wardrobe_tools.add_garment(**request.model_dump())


@app.get("/garments/{garment_id}")
def get_garment(garment_id: str, closet: WardrobeApp = Depends(get_closet)) -> dict:
    garment = closet.wardrobe_tools.get_garment(garment_id)
    if garment is None:
        raise HTTPException(status_code=404, detail=f"garment {garment_id} not found")
    return garment


@app.patch("/garments/{garment_id}")
def update_garment(garment_id: str, request: GarmentUpdate, closet: WardrobeApp = Depends(get_closet)) -> dict:
    try:
        updated = closet.wardrobe_tools.update_garment(garment_id, request.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if updated is None:
        raise HTTPException(status_code=404, detail=f"garment {garment_id} not found")
    return updated


@app.delete("/garments/{garment_id}", status_code=204)
def delete_garment(garment_id: str, closet: WardrobeApp = Depends(get_closet)) -> None:
    if not closet.wardrobe_tools.delete_garment(garment_id):
        raise HTTPException(status_code=404, detail=f"garment {garment_id} not found")


@app.get("/laundry")
def list_laundry(closet: WardrobeApp = Depends(get_closet)) -> list:
    """Garments waiting to be washed before they can be suggested again."""

    return closet.wardrobe_tools.list_laundry()


@app.post("/garments/clean")
def mark_clean(request: LaundryRequest, closet: WardrobeApp = Depends(get_closet)) -> dict:
    cleaned = closet.wardrobe_tools.mark_clean(garment_ids=request.garment_ids)
    return {"cleaned": cleaned}


@app.post("/wear", status_code=201)
def log_wear(request: WearLogRequest, closet: WardrobeApp = Depends(get_closet)) -> dict:
    try:
        return closet.wardrobe_tools.log_wear(**request.model_dump())
    except GarmentNotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"unknown garments: {exc.garment_ids}") from exc


@app.get("/wear-logs")
def list_wear_logs(limit: int = 50, closet: WardrobeApp = Depends(get_closet)) -> list:
    return closet.wardrobe_tools.list_wear_logs(limit=limit)


@app.post("/suggestions")
def suggest_outfits(request: SuggestionRequest, closet: WardrobeApp = Depends(get_closet)) -> dict:
    """Rank outfits for inline weather, the given coordinates or the configured location."""

    response = closet.suggest(
        dress_code=request.dress_code,
        weather=request.weather.to_weather() if request.weather else None,
        latitude=request.latitude,
        longitude=request.longitude,
        days_no_repeat=request.days_no_repeat,
        now=request.now,
        max_results=request.max_results,
    )
    return {
        "weather": asdict(response.weather),
        "weather_source": response.weather_source,
        "suggestions": [
            {
                "top": asdict(suggestion.top),
                "bottom": asdict(suggestion.bottom),
                "shoe": asdict(suggestion.shoe),
                "outerwear": _optional_asdict(suggestion.outerwear),
            }
            for suggestion in response.suggestions
        ],
    }


def _optional_asdict(value: Optional[object]) -> Optional[dict]:
    return asdict(value) if value is not None else None


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
