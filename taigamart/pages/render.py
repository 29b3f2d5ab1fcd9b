"""
Plain-text rendering of view-models for the CLI.
"""

from typing import List

from ..common.constants import DEFAULT_CURRENCY, MAX_PAGE_BUTTONS
from ..common.text_utils import calculate_discount, format_price, truncate_text
from ..models import Category, Product, Vendor


def heading(title: str) -> List[str]:
    return [title, "=" * len(title)]


def render_product_card(product: Product, currency: str = DEFAULT_CURRENCY) -> str:
    """
    One-line product card.

    Example:
        Wireless Mouse by Acme Co | LKR 1,800.00 (was LKR 2,000.00, -10%) | In stock
    """
    price = format_price(product.display_price, currency)
    if product.display_price < product.price:
        discount = calculate_discount(product.price, product.display_price)
        price += f" (was {format_price(product.price, currency)}, -{discount}%)"

    stock = "In stock" if product.in_stock else "Out of stock"
    name = truncate_text(product.name or "Unnamed product", 60)
    rating = f" | ★ {product.average_rating:.1f} ({product.total_reviews})" if product.total_reviews else ""
    return f"{name} by {product.vendor.name} | {price} | {stock}{rating}"


def render_product_detail(product: Product, currency: str = DEFAULT_CURRENCY) -> List[str]:
    lines = heading(product.name or "Product")
    lines.append(render_product_card(product, currency))
    if product.sku:
        lines.append(f"SKU: {product.sku}")
    if product.categories:
        lines.append(f"Category: {product.categories[0].name}")
    lines.append(f"Vendor: {product.vendor.name} (/vendors/{product.vendor.slug})")
    if product.short_description or product.description:
        lines.append("")
        lines.append(product.short_description or product.description)
    for attribute in product.attributes:
        lines.append(f"  {attribute.name}: {attribute.value}")
    for variation in product.variations:
        lines.append(f"  - {variation.name}: {format_price(variation.sale_price or variation.price, currency)}")
    if product.images:
        lines.append(f"Images: {len(product.images)}")
    return lines


def render_vendor(vendor: Vendor) -> str:
    city = f" ({vendor.city})" if vendor.city else ""
    return f"{vendor.name}{city}: /vendors/{vendor.slug}"


def render_category(category: Category) -> str:
    return f"{category.name}: /categories/{category.slug or category.id}"


def render_pagination(current_page: int, total_pages: int) -> str:
    """
    Pagination controls; empty when there is a single page.

    At most MAX_PAGE_BUTTONS numbered buttons are shown, the current one in
    brackets. Disabled Previous/Next are wrapped in parentheses.
    """
    if total_pages <= 1:
        return ""

    buttons = ["(Previous)" if current_page == 1 else "Previous"]
    for page in range(1, min(MAX_PAGE_BUTTONS, total_pages) + 1):
        buttons.append(f"[{page}]" if page == current_page else str(page))
    buttons.append("(Next)" if current_page == total_pages else "Next")
    return " ".join(buttons)
