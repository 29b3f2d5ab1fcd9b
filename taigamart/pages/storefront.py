"""
Storefront Pages

Each page owns a fetch cycle and renders its state as plain text:
a loading line, a session-expired notice, an error line, an explicit empty
state, or the list followed by pagination controls.

Pages:
    HomePage             - featured / on sale / newest sections
    ProductListPage      - filtered, searchable product listing
    DealsPage            - products on sale
    CategoriesPage       - category directory
    CategoryProductsPage - products of one category (by slug or id)
    VendorsPage          - vendor directory
    VendorProductsPage   - products of one vendor (by slug or name)
    ProductDetailPage    - single product
    WishlistPage         - products saved by id
    RecordListPage       - generic record list (FAQs, posts, jobs, help, press)
    SizeGuidePage        - size guide text
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import fields
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..api.errors import APIError, AuthenticationExpired
from ..api.storefront import CatalogService, ContentService, ProductService, SearchFilters
from ..common.constants import (
    DEALS_PER_PAGE,
    DEFAULT_CURRENCY,
    HOME_SECTION_LIMIT,
    PRODUCTS_PER_PAGE,
)
from ..common.text_utils import strip_html
from ..models import Category, Vendor
from ..normalization import (
    find_category,
    find_vendor,
    normalize_category,
    normalize_faq,
    normalize_help_article,
    normalize_job,
    normalize_post,
    normalize_press_item,
    normalize_product,
    normalize_public_vendor,
    unwrap_item,
    unwrap_list,
)
from .fetch_cycle import FetchCycle, ItemFetchCycle, PaginatedFetchCycle
from .render import (
    heading,
    render_category,
    render_pagination,
    render_product_card,
    render_product_detail,
    render_vendor,
)

logger = logging.getLogger(__name__)

_FILTER_NAMES = {f.name for f in fields(SearchFilters)}


def _search_filters(values: Dict[str, Any]) -> SearchFilters:
    return SearchFilters(**{k: v for k, v in values.items() if k in _FILTER_NAMES})


class ListPage:
    """Base for pages rendering one fetch cycle as a list."""

    title = ""
    empty_message = "Nothing to show yet."

    def __init__(self, cycle: FetchCycle):
        self.cycle = cycle

    def load(self) -> bool:
        return self.cycle.load()

    @property
    def items(self) -> List[Any]:
        return self.cycle.items

    def render_item(self, item: Any) -> str:
        return str(item)

    def render_header(self) -> List[str]:
        return heading(self.title)

    def render_body(self) -> List[str]:
        return [self.render_item(item) for item in self.items]

    def render(self) -> str:
        lines = self.render_header()
        cycle = self.cycle

        if cycle.loading:
            lines.append("Loading...")
        elif cycle.redirect_to:
            lines.append(f"Your session has expired. Please log in again at {cycle.redirect_to}")
        else:
            if cycle.error:
                lines.append(f"Error: {cycle.error}")
            if self.items:
                lines.extend(self.render_body())
            elif not cycle.error:
                lines.append(self.empty_message)

            if isinstance(cycle, PaginatedFetchCycle) and self.items:
                controls = render_pagination(cycle.current_page, cycle.total_pages)
                if controls:
                    lines.extend(["", controls])

        return "\n".join(lines)


class ProductGridPage(ListPage):
    """List page of normalized products."""

    def __init__(self, cycle: FetchCycle, currency: str = DEFAULT_CURRENCY):
        super().__init__(cycle)
        self.currency = currency

    def render_item(self, item: Any) -> str:
        return render_product_card(item, self.currency)

    def set_page(self, page: int) -> bool:
        return self.cycle.set_page(page)


class ProductListPage(ProductGridPage):
    """
    All products, with filters and free-text search (q).

    Usage:
        page = ProductListPage(products)
        page.apply_filters(category="3", in_stock=True, q="mouse")
        print(page.render())
    """

    title = "All Products"
    empty_message = "No products found. Try adjusting your filters."

    def __init__(self, products: ProductService, currency: str = DEFAULT_CURRENCY,
                 per_page: int = PRODUCTS_PER_PAGE, **filters: Any):
        self.products = products
        cycle = PaginatedFetchCycle(self._fetch, normalize_product, per_page=per_page,
                                    filters=filters, name="products")
        super().__init__(cycle, currency)

    def _fetch(self, page: int, per_page: Optional[int], filters: Dict[str, Any]) -> Any:
        query = filters.get('q')
        search = _search_filters(filters)
        if query:
            return self.products.search_products(query, search, page=page, per_page=per_page)
        return self.products.get_products(search, page=page, per_page=per_page)

    def apply_filters(self, **filters: Any) -> bool:
        return self.cycle.set_filters(**filters)


class DealsPage(ProductGridPage):
    """Products on sale."""

    title = "Limited Time Deals"
    empty_message = "No deals available right now. Check back soon."

    def __init__(self, products: ProductService, currency: str = DEFAULT_CURRENCY,
                 per_page: int = DEALS_PER_PAGE):
        self.products = products
        cycle = PaginatedFetchCycle(
            lambda page, per_page, filters: products.get_products_on_sale(page=page, per_page=per_page),
            normalize_product, per_page=per_page, name="deals")
        super().__init__(cycle, currency)


class CategoryProductsPage(ProductGridPage):
    """
    Products of one category.

    The route carries a slug (or a numeric id); the category list is fetched
    to resolve it before the products are requested by category id.
    """

    empty_message = "No products found in this category."

    def __init__(self, catalog: CatalogService, products: ProductService, slug: str,
                 currency: str = DEFAULT_CURRENCY, per_page: int = DEALS_PER_PAGE):
        self.catalog = catalog
        self.products = products
        self.slug = slug
        self.category: Optional[Category] = None
        self.resolved = False
        cycle = PaginatedFetchCycle(self._fetch, normalize_product, per_page=per_page,
                                    name=f"category {slug}")
        super().__init__(cycle, currency)

    @property
    def title(self) -> str:
        return self.category.name if self.category and self.category.name else "Category"

    def _fetch(self, page: int, per_page: Optional[int], filters: Dict[str, Any]) -> Any:
        raw = find_category(unwrap_list(self.catalog.get_categories()), self.slug)
        self.resolved = True
        if raw is None:
            self.category = None
            return []

        self.category = normalize_category(raw)
        search = SearchFilters(category=str(raw.get('id')))
        return self.products.get_products(search, page=page, per_page=per_page)

    def render(self) -> str:
        if self.resolved and self.category is None and not self.cycle.error and not self.cycle.loading:
            return "\n".join(heading(self.title) + [f"Category not found: {self.slug}"])
        return super().render()


class VendorProductsPage(ProductGridPage):
    """Products of one vendor, resolved from the vendor directory by slug or name."""

    empty_message = "This vendor has no products yet."

    def __init__(self, catalog: CatalogService, products: ProductService, slug: str,
                 currency: str = DEFAULT_CURRENCY, per_page: int = DEALS_PER_PAGE):
        self.catalog = catalog
        self.products = products
        self.slug = slug
        self.vendor: Optional[Vendor] = None
        self.resolved = False
        cycle = PaginatedFetchCycle(self._fetch, normalize_product, per_page=per_page,
                                    name=f"vendor {slug}")
        super().__init__(cycle, currency)

    @property
    def title(self) -> str:
        return self.vendor.name if self.vendor else "Vendor"

    def _fetch(self, page: int, per_page: Optional[int], filters: Dict[str, Any]) -> Any:
        raw = find_vendor(unwrap_list(self.catalog.get_vendors()), self.slug)
        self.resolved = True
        if raw is None:
            self.vendor = None
            return []

        self.vendor = normalize_public_vendor(raw)
        search = SearchFilters(vendor=str(raw.get('id')))
        return self.products.get_products(search, page=page, per_page=per_page)

    def render(self) -> str:
        if self.resolved and self.vendor is None and not self.cycle.error and not self.cycle.loading:
            return "\n".join(heading(self.title) + [f"Vendor not found: {self.slug}"])
        return super().render()


class CategoriesPage(ListPage):
    title = "Categories"
    empty_message = "No categories available."

    def __init__(self, catalog: CatalogService):
        super().__init__(FetchCycle(catalog.get_categories, normalize_category, name="categories"))

    def render_item(self, item: Any) -> str:
        return render_category(item)


class VendorsPage(ListPage):
    title = "Vendors"
    empty_message = "No vendors available."

    def __init__(self, catalog: CatalogService):
        super().__init__(FetchCycle(catalog.get_vendors, normalize_public_vendor, name="vendors"))

    def render_item(self, item: Any) -> str:
        return render_vendor(item)


class ProductDetailPage(ListPage):
    """Single product by slug or id."""

    title = "Product"
    empty_message = "Product not found."

    def __init__(self, products: ProductService, slug: str, currency: str = DEFAULT_CURRENCY):
        self.currency = currency
        super().__init__(ItemFetchCycle(lambda: products.get_product(slug), normalize_product,
                                        name=f"product {slug}"))

    @property
    def product(self):
        return self.cycle.item

    def render_header(self) -> List[str]:
        return [] if self.product else heading(self.title)

    def render_body(self) -> List[str]:
        return render_product_detail(self.product, self.currency)


class WishlistPage(ProductGridPage):
    """
    Products saved to the wishlist, fetched by id in parallel.

    Products that fail to load are skipped; an expired session still
    redirects to login.
    """

    title = "Your Wishlist"
    empty_message = "Your wishlist is empty."

    def __init__(self, products: ProductService, product_ids: Sequence[str],
                 currency: str = DEFAULT_CURRENCY, max_workers: int = 8):
        self.products = products
        self.product_ids = list(product_ids)
        self.max_workers = max_workers
        super().__init__(FetchCycle(self._fetch, normalize_product, name="wishlist"), currency)

    def _fetch_one(self, product_id: str) -> Optional[dict]:
        try:
            return unwrap_item(self.products.get_product(product_id))
        except AuthenticationExpired:
            raise
        except APIError as e:
            logger.warning("Skipping wishlist product %s: %s", product_id, e.message)
            return None

    def _fetch(self) -> List[dict]:
        if not self.product_ids:
            return []
        workers = max(1, min(self.max_workers, len(self.product_ids)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            records = list(executor.map(self._fetch_one, self.product_ids))
        return [record for record in records if record]


class HomePage:
    """Featured, on-sale and newest product sections, loaded concurrently."""

    def __init__(self, products: ProductService, currency: str = DEFAULT_CURRENCY,
                 limit: int = HOME_SECTION_LIMIT):
        self.currency = currency
        self.sections = [
            ("Featured Products", FetchCycle(lambda: products.get_featured_products(limit),
                                             normalize_product, name="featured")),
            ("On Sale", FetchCycle(lambda: products.get_products_on_sale(limit),
                                   normalize_product, name="on sale")),
            ("New Arrivals", FetchCycle(lambda: products.get_newest_products(limit),
                                        normalize_product, name="newest")),
        ]

    def load(self) -> bool:
        with ThreadPoolExecutor(max_workers=len(self.sections)) as executor:
            results = list(executor.map(lambda section: section[1].load(), self.sections))
        return all(results)

    def render(self) -> str:
        lines: List[str] = []
        for title, cycle in self.sections:
            if lines:
                lines.append("")
            lines.extend(heading(title))
            if cycle.redirect_to:
                lines.append(f"Your session has expired. Please log in again at {cycle.redirect_to}")
            elif cycle.error:
                lines.append(f"Error: {cycle.error}")
            elif not cycle.items:
                lines.append("No products to show.")
            else:
                lines.extend(render_product_card(p, self.currency) for p in cycle.items)
        return "\n".join(lines)


class RecordListPage(ListPage):
    """Plain record list (content pages, POS listings) with its own item renderer."""

    def __init__(self, title: str, fetch: Callable[[], Any], normalize: Callable[[Any], Any],
                 render_item: Callable[[Any], str], empty_message: str):
        super().__init__(FetchCycle(fetch, normalize, name=title.lower()))
        self.title = title
        self.empty_message = empty_message
        self._render_item = render_item

    def render_item(self, item: Any) -> str:
        return self._render_item(item)


def faq_page(content: ContentService) -> RecordListPage:
    return RecordListPage(
        "Frequently Asked Questions", content.get_faqs, normalize_faq,
        lambda faq: f"Q: {faq.question}\nA: {faq.answer}\n",
        "No FAQs available yet.")


def blog_page(content: ContentService, page: int = 1) -> RecordListPage:
    return RecordListPage(
        "Blog", lambda: content.get_posts(page), normalize_post,
        lambda post: f"{post.title}\n  {post.author} • {post.published_at}\n  {post.excerpt}\n",
        "No posts available.")


def careers_page(content: ContentService) -> RecordListPage:
    return RecordListPage(
        "Careers", content.get_jobs, normalize_job,
        lambda job: f"{job.title} ({job.location})\n  {job.description}\n",
        "No open positions right now.")


def help_page(content: ContentService) -> RecordListPage:
    return RecordListPage(
        "Help Center", content.get_help, normalize_help_article,
        lambda article: f"{article.title}\n  {article.content}\n",
        "No help articles available yet.")


def press_page(content: ContentService, page: int = 1) -> RecordListPage:
    return RecordListPage(
        "Press", lambda: content.get_press(page), normalize_press_item,
        lambda item: f"{item.title}\n  {item.published_at}\n  {item.excerpt}\n",
        "No press releases yet.")


class SizeGuidePage(ListPage):
    title = "Size Guide"
    empty_message = "Our comprehensive size guide will be available soon."

    def __init__(self, content: ContentService):
        super().__init__(ItemFetchCycle(
            content.get_size_guide,
            lambda record: strip_html(record.get('content') if isinstance(record.get('content'), str) else None),
            name="size guide"))

    def render_body(self) -> List[str]:
        text = self.cycle.item
        return [text] if text else [self.empty_message]


CONTENT_PAGES = {
    'faqs': faq_page,
    'posts': blog_page,
    'jobs': careers_page,
    'help': help_page,
    'press': press_page,
}
