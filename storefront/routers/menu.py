from fastapi import APIRouter

from storefront.schemas.menu_item import MenuItemResponse
from storefront.services import menu_service

router = APIRouter()


@router.get("", response_model=list[MenuItemResponse])
async def get_menu() -> list[MenuItemResponse]:
    return menu_service.list_menu_items()
