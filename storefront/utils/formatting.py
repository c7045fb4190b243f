def format_price(price_in_paise: int) -> str:
    """29900 -> "₹299.00"."""
    return f"₹{price_in_paise / 100:.2f}"
