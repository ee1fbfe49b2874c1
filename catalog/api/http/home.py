from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from catalog.constants import AUTHOR_LIST_URL

router = APIRouter()


@router.get("/", include_in_schema=False)
async def home() -> RedirectResponse:
    """Send visitors of the site root to the author list."""
    return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_302_FOUND)
