from fastapi import APIRouter, Depends, HTTPException

from app.application.ports.vehicle_catalog import VehicleCatalogPort
from app.wiring.dependencies import get_vehicle_catalog


router = APIRouter(prefix="/api/v1/vehicles")


@router.get("/makes")
def list_makes(catalog: VehicleCatalogPort = Depends(get_vehicle_catalog)) -> list[str]:
    return catalog.makes()


@router.get("/makes/{make}/models")
def list_models(make: str, catalog: VehicleCatalogPort = Depends(get_vehicle_catalog)) -> list[str]:
    models = catalog.models(make)
    if not models:
        raise HTTPException(status_code=404, detail=f"Unknown make: {make}")
    return models
