from decimal import Decimal

from storefront.models.menu_item import MenuItem
from storefront.schemas.menu_item import MenuItemResponse

MENU: tuple[MenuItem, ...] = (
    MenuItem(
        id=1,
        name="Margherita Pizza",
        category="Pizza",
        price=Decimal("12.99"),
        description="Classic tomato sauce, mozzarella, and basil",
        image="🍕",
    ),
    MenuItem(
        id=2,
        name="Cheeseburger",
        category="Burgers",
        price=Decimal("9.99"),
        description="Beef patty with cheese, lettuce, and tomato",
        image="🍔",
    ),
    MenuItem(
        id=3,
        name="Caesar Salad",
        category="Salads",
        price=Decimal("8.99"),
        description="Romaine lettuce with Caesar dressing and croutons",
        image="🥗",
    ),
    MenuItem(
        id=4,
        name="Pepperoni Pizza",
        category="Pizza",
        price=Decimal("14.99"),
        description="Tomato sauce, mozzarella, and pepperoni",
        image="🍕",
    ),
    MenuItem(
        id=5,
        name="Pasta Carbonara",
        category="Pasta",
        price=Decimal("13.99"),
        description="Creamy pasta with bacon and parmesan",
        image="🍝",
    ),
    MenuItem(
        id=6,
        name="Chicken Wings",
        category="Appetizers",
        price=Decimal("10.99"),
        description="Spicy buffalo wings with ranch dressing",
        image="🍗",
    ),
)


def list_menu_items() -> list[MenuItemResponse]:
    return [MenuItemResponse.model_validate(item) for item in MENU]
