"""API root: entry-point links for clients discovering the API."""

from fastapi import APIRouter, Request

from courselib.links import LinkBuilder
from courselib.schemas import LinkDto

router = APIRouter(tags=["root"])


@router.get("", name="get_root", response_model=list[LinkDto])
async def get_root(request: Request) -> list[LinkDto]:
    return LinkBuilder(request).links_for_root()
