from fastapi import APIRouter, HTTPException

from ..dimensions import DIMENSIONS
from ..schemas import SCHEMA_NAMES, json_schema

router = APIRouter(prefix="/schemas", tags=["schemas"])


@router.get("")
def list_schemas():
	return {
		"schemas": list(SCHEMA_NAMES),
		"tags": {name: list(spec.tags) for name, spec in DIMENSIONS.items()},
	}


@router.get("/{name}")
def get_schema(name: str):
	if name not in SCHEMA_NAMES:
		raise HTTPException(status_code=404, detail=f"unknown schema {name!r}")
	return json_schema(name)
