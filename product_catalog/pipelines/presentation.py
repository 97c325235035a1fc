import html
from typing import Optional
from product_catalog.core.stars import render_stars
from product_catalog.models.product import Product
from product_catalog.utils.exceptions import InvalidFilterValueError

def format_price(price: float) -> str:
    if float(price).is_integer():
        return f"₹{int(price):,}"
    return f"₹{price:,.2f}"

def stock_label(product: Product) -> str:
    return "In Stock" if product.in_stock else "Out of Stock"

def category_path(product: Product) -> str:
    return f"{product.category} > {product.subcategory}"

def count_label(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} products"

def product_card_html(product: Product) -> str:
    """Card markup for the results grid; catalog text is escaped."""
    stock_class = "stock-in" if product.in_stock else "stock-out"
    return f"""
    <div class="product-card">
        <div class="product-title">{html.escape(product.name)}</div>
        <div class="product-meta">{html.escape(category_path(product))}</div>
        <div class="product-price">{format_price(product.price)}</div>
        <div class="product-meta">
            <span class="stars">{render_stars(product.rating)}</span> ({product.rating})
        </div>
        <div class="product-meta">Brand: {html.escape(product.brand)}</div>
        <div class="{stock_class}">{stock_label(product)}</div>
    </div>
    """

def parse_optional_float(text: Optional[str]) -> Optional[float]:
    """Blank input means the filter is off."""
    if text is None or not text.strip():
        return None
    try:
        return float(text)
    except ValueError as e:
        raise InvalidFilterValueError(f"Not a number: {text!r}") from e
