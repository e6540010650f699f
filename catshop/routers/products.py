from fastapi import APIRouter

from catshop.config import settings
from catshop.schemas.product import ProductPageResponse
from catshop.seed import ALL_CATS
from catshop.services.pagination import list_page, parse_positive_int

router = APIRouter(tags=["products"])


@router.get("/products", response_model=ProductPageResponse)
async def get_products(page: str | None = None, limit: str | None = None):
    default_limit = settings.products_page_size
    result = list_page(
        page=parse_positive_int(page, 1),
        limit=parse_positive_int(limit, default_limit),
        source=ALL_CATS,
        default_limit=default_limit,
    )
    return {"products": result.items, "pages": result.total_pages}
