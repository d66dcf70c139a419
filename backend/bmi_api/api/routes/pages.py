"""Pages — serves the single-page calculator UI at GET /.

Invariants:
    - GET / always returns 200 text/html
    - The page posts {weight_kg, height_m} to /api/calculate and shows bmi to one decimal
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
INDEX_PAGE = STATIC_DIR / "index.html"

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def index():
    return FileResponse(INDEX_PAGE, media_type="text/html")
