from decimal import ROUND_HALF_UP, Decimal
import math


def format_rating(rating: float) -> dict[str, str]:
    """
    Star display for a 0-5 rating: ``{"stars": "★★★★☆", "value": "4.2"}``.
    Both stars and value round halves up (4.5 shows five stars, 4.25 shows "4.3").
    """
    rounded = int(math.floor(rating + 0.5))
    stars = "★" * rounded + "☆" * (5 - rounded)
    value = Decimal(str(rating)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return {"stars": stars, "value": str(value)}


def format_stock(stock: int | None) -> str | None:
    if stock is None:
        return None
    return f"{stock} in stock" if stock > 0 else "Currently out of stock"
