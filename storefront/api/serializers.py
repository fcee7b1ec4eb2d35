"""レスポンス用のエンティティ変換."""
from typing import Any

from storefront.domain.entities import Cart, Item, Payment


def item_to_dict(item: Item) -> dict[str, Any]:
    return {
        "item_id": str(item.item_id),
        "name": item.name,
        "description": item.description,
        "price": item.price.value,
        "image_url": item.image_url,
        "sku": item.sku,
    }


def cart_to_dict(cart: Cart) -> dict[str, Any]:
    """カートをレスポンス形式に変換する（金額は最小通貨単位の整数）."""
    return {
        "cart_id": str(cart.cart_id),
        "status": cart.status.value,
        "items": [
            {
                "item_id": str(line.item_id),
                "quantity": line.quantity,
                "unit_price": line.unit_price.value,
                "subtotal": line.get_subtotal().value,
            }
            for line in cart.get_lines()
        ],
        "total": cart.get_total().value,
        "payment_id": str(cart.payment_id) if cart.payment_id else None,
        "created_at": cart.created_at.isoformat(),
        "updated_at": cart.updated_at.isoformat(),
    }


def payment_to_dict(payment: Payment) -> dict[str, Any]:
    return {
        "payment_id": str(payment.payment_id),
        "cart_id": str(payment.cart_id),
        "payment_type": payment.payment_type.value,
        "status": payment.status.value,
        "amount": payment.amount.value,
        "currency": payment.currency,
        "provider_transaction_id": payment.provider_transaction_id,
        "metadata": payment.metadata,
        "created_at": payment.created_at.isoformat(),
        "updated_at": payment.updated_at.isoformat(),
    }
