"""商品カタログの静的実装."""
from storefront.domain.entities import Item
from storefront.domain.identifiers import ItemId
from storefront.domain.ports import ItemCatalog
from storefront.domain.value_objects import Money

DEMO_ITEMS: list[dict] = [
    {
        "id": "item-001",
        "name": "Classic Canvas Tote",
        "description": "Heavy-duty cotton tote bag with reinforced handles.",
        "price": 2500,
        "imageUrl": "/images/canvas-tote.jpg",
        "sku": "TOTE-CLS-001",
    },
    {
        "id": "item-002",
        "name": "Ceramic Pour-Over Set",
        "description": "Hand-glazed dripper with a matching 600ml carafe.",
        "price": 4800,
        "imageUrl": "/images/pour-over.jpg",
        "sku": "KIT-POV-002",
    },
    {
        "id": "item-003",
        "name": "Merino Crew Socks",
        "description": "Three pairs of breathable merino wool socks.",
        "price": 1899,
        "imageUrl": "/images/merino-socks.jpg",
        "sku": "APP-SCK-003",
    },
    {
        "id": "item-004",
        "name": "Wireless Desk Lamp",
        "description": "Dimmable LED lamp with a built-in charging pad.",
        "price": 7950,
        "imageUrl": "/images/desk-lamp.jpg",
        "sku": "HOM-LMP-004",
    },
    {
        "id": "item-005",
        "name": "Leather Card Wallet",
        "description": "Slim full-grain leather wallet with four card slots.",
        "price": 3500,
        "imageUrl": "/images/card-wallet.jpg",
        "sku": "ACC-WLT-005",
    },
]


def _to_item(data: dict) -> Item:
    return Item(
        item_id=ItemId(data["id"]),
        name=data["name"],
        description=data["description"],
        price=Money.of(data["price"]),
        image_url=data["imageUrl"],
        sku=data["sku"],
    )


class StaticItemCatalog(ItemCatalog):
    """起動時に一度だけ読み込む読み取り専用カタログ."""

    def __init__(self, items: list[Item] | None = None) -> None:
        """初期化.

        Args:
            items: カタログ商品（省略時はデモ商品）
        """
        if items is None:
            items = [_to_item(data) for data in DEMO_ITEMS]
        self._items: dict[str, Item] = {item.item_id.value: item for item in items}

    def find_by_id(self, item_id: ItemId) -> Item | None:
        """商品IDで検索する."""
        return self._items.get(item_id.value)

    def find_all(self) -> list[Item]:
        """全商品を取得する."""
        return list(self._items.values())
