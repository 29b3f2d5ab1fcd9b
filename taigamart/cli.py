#!/usr/bin/env python3
"""
Taiga Marketplace CLI

Browse the storefront and run point-of-sale operations from the terminal.
Rendered pages go to stdout; logs go to stderr.

Usage:
    taigamart products --category 3 --in-stock --page 2
    taigamart products --search "wireless mouse"
    taigamart deals
    taigamart vendor acme-co
    taigamart wishlist 12 15 18
    taigamart content faqs
    taigamart contact --name Jane --email jane@example.com --message "Hello"
    taigamart track TG-ABC123
    taigamart login <token> [--pos]
    taigamart pos dashboard
    taigamart pos sale --item 12:2 --item 15:1 --discount 10 --tax 0.08

Exit codes:
    0 = page rendered / action succeeded
    1 = request failed
    2 = session expired (stored token cleared, log in again)
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api import (
    APIError,
    AuthContext,
    AuthenticationExpired,
    CatalogService,
    ContentService,
    FileTokenStore,
    MarketplaceAPIClient,
    POSService,
    ProductService,
)
from .common.config_loader import Settings, load_settings
from .common.constants import (
    POS_AUTH_KEY,
    POS_LOGIN_ROUTE,
    STOREFRONT_AUTH_KEY,
    STOREFRONT_LOGIN_ROUTE,
)
from .common.log_config import setup_logging
from .normalization import normalize_product, unwrap_item
from .normalization.values import as_mapping
from .pages import (
    CONTENT_PAGES,
    CategoriesPage,
    CategoryProductsPage,
    ContactForm,
    DealsPage,
    FormStatus,
    HomePage,
    OrderTrackingForm,
    PaginatedFetchCycle,
    PosCart,
    ProductDetailPage,
    ProductGridPage,
    ProductListPage,
    RecordListPage,
    SizeGuidePage,
    VendorProductsPage,
    VendorsPage,
    WishlistPage,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_AUTH = 2


def storefront_auth(store: FileTokenStore) -> AuthContext:
    return AuthContext.from_store(store, STOREFRONT_AUTH_KEY, STOREFRONT_LOGIN_ROUTE, nested=True)


def pos_auth(store: FileTokenStore) -> AuthContext:
    return AuthContext.from_store(store, POS_AUTH_KEY, POS_LOGIN_ROUTE, nested=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taigamart",
        description="Taiga marketplace storefront and POS client",
    )
    parser.add_argument("--api-url", help="Storefront API URL (default: settings / TAIGA_API_URL)")
    parser.add_argument("--pos-api-url", help="POS API URL (default: settings / TAIGA_POS_API_URL)")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--quiet", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("home", help="Featured, on-sale and newest products")

    products = sub.add_parser("products", help="Browse all products")
    products.add_argument("--page", type=int, default=1)
    products.add_argument("--search", help="Free-text search")
    products.add_argument("--category")
    products.add_argument("--vendor")
    products.add_argument("--min-price", type=float)
    products.add_argument("--max-price", type=float)
    products.add_argument("--in-stock", action="store_true", default=None)
    products.add_argument("--featured", action="store_true", default=None)
    products.add_argument("--sort", choices=["name", "price", "rating", "newest", "oldest"])
    products.add_argument("--order", choices=["asc", "desc"])

    deals = sub.add_parser("deals", help="Products on sale")
    deals.add_argument("--page", type=int, default=1)

    sub.add_parser("categories", help="List categories")
    category = sub.add_parser("category", help="Products of one category")
    category.add_argument("slug")
    category.add_argument("--page", type=int, default=1)

    sub.add_parser("vendors", help="List vendors")
    vendor = sub.add_parser("vendor", help="Products of one vendor")
    vendor.add_argument("slug")
    vendor.add_argument("--page", type=int, default=1)

    product = sub.add_parser("product", help="Show a single product")
    product.add_argument("slug", help="Product slug or id")

    wishlist = sub.add_parser("wishlist", help="Show wishlist products")
    wishlist.add_argument("ids", nargs="*", help="Product ids")

    content = sub.add_parser("content", help="Content pages")
    content.add_argument("page_name", choices=sorted(CONTENT_PAGES) + ["size-guide"])
    content.add_argument("--page", type=int, default=1)

    contact = sub.add_parser("contact", help="Send a message to support")
    contact.add_argument("--name", required=True)
    contact.add_argument("--email", required=True)
    contact.add_argument("--message", required=True)

    track = sub.add_parser("track", help="Track an order by number")
    track.add_argument("number")

    login = sub.add_parser("login", help="Store an API token")
    login.add_argument("token")
    login.add_argument("--pos", action="store_true", help="Store the POS token instead")

    logout = sub.add_parser("logout", help="Forget the stored API token")
    logout.add_argument("--pos", action="store_true")

    pos = sub.add_parser("pos", help="Point-of-sale operations")
    pos_sub = pos.add_subparsers(dest="pos_command", required=True)
    pos_sub.add_parser("dashboard", help="Dashboard statistics")
    pos_products = pos_sub.add_parser("products", help="POS product list")
    pos_products.add_argument("--page", type=int, default=1)
    pos_sub.add_parser("orders", help="Recent orders")
    pos_sub.add_parser("inventory", help="Stock levels")
    customers = pos_sub.add_parser("customers", help="Search customers")
    customers.add_argument("query")
    sale = pos_sub.add_parser("sale", help="Ring up a sale")
    sale.add_argument("--item", action="append", required=True, metavar="PRODUCT_ID:QTY")
    sale.add_argument("--payment", default="cash")
    sale.add_argument("--customer")
    sale.add_argument("--discount", type=float, default=0, help="Discount percent")
    sale.add_argument("--tax", type=float, default=0, help="Tax rate (0.08 = 8%%)")

    return parser


def page_exit_code(cycle) -> int:
    if cycle.redirect_to:
        return EXIT_AUTH
    if cycle.error:
        return EXIT_ERROR
    return EXIT_OK


def show(page) -> int:
    page.load()
    print(page.render())
    return page_exit_code(page.cycle)


def run_storefront(args: argparse.Namespace, settings: Settings, client: MarketplaceAPIClient) -> int:
    products = ProductService(client)
    catalog = CatalogService(client)
    content = ContentService(client)
    currency = settings.currency

    if args.command == "home":
        home = HomePage(products, currency)
        home.load()
        print(home.render())
        return max(page_exit_code(cycle) for _, cycle in home.sections)

    if args.command == "products":
        page = ProductListPage(
            products, currency,
            q=args.search, category=args.category, vendor=args.vendor,
            min_price=args.min_price, max_price=args.max_price,
            in_stock=args.in_stock, featured=args.featured,
            sort=args.sort, order=args.order,
        )
        page.set_page(args.page)
        print(page.render())
        return page_exit_code(page.cycle)

    if args.command == "deals":
        page = DealsPage(products, currency)
        page.set_page(args.page)
        print(page.render())
        return page_exit_code(page.cycle)

    if args.command == "categories":
        return show(CategoriesPage(catalog))

    if args.command == "category":
        page = CategoryProductsPage(catalog, products, args.slug, currency)
        page.set_page(args.page)
        print(page.render())
        return page_exit_code(page.cycle)

    if args.command == "vendors":
        return show(VendorsPage(catalog))

    if args.command == "vendor":
        page = VendorProductsPage(catalog, products, args.slug, currency)
        page.set_page(args.page)
        print(page.render())
        return page_exit_code(page.cycle)

    if args.command == "product":
        return show(ProductDetailPage(products, args.slug, currency))

    if args.command == "wishlist":
        return show(WishlistPage(products, args.ids, currency))

    if args.command == "content":
        if args.page_name == "size-guide":
            return show(SizeGuidePage(content))
        factory = CONTENT_PAGES[args.page_name]
        if args.page_name in ("posts", "press"):
            return show(factory(content, args.page))
        return show(factory(content))

    if args.command == "contact":
        form = ContactForm(content)
        form.submit(name=args.name, email=args.email, message=args.message)
        print(form.message)
        if form.redirect_to:
            return EXIT_AUTH
        return EXIT_OK if form.status == FormStatus.SUCCESS else EXIT_ERROR

    if args.command == "track":
        form = OrderTrackingForm(content)
        result = form.track(args.number)
        if result:
            print(f"Order:              {result.order_number}")
            print(f"Status:             {result.status}")
            print(f"Estimated Delivery: {result.eta}")
            print(f"Last Update:        {result.updated_at}")
        else:
            print(form.message)
        if form.redirect_to:
            return EXIT_AUTH
        return EXIT_ERROR if form.status == FormStatus.ERROR else EXIT_OK

    raise ValueError(f"Unknown command: {args.command}")


def parse_sale_items(values: List[str]) -> List[tuple]:
    """Parse PRODUCT_ID:QTY arguments (quantity defaults to 1)."""
    items = []
    for value in values:
        product_id, _, quantity = value.partition(":")
        if not product_id:
            raise ValueError(f"Invalid item: {value!r}")
        items.append((product_id, int(quantity) if quantity else 1))
    return items


def run_pos(args: argparse.Namespace, settings: Settings, client: MarketplaceAPIClient) -> int:
    pos = POSService(client)

    if args.pos_command == "dashboard":
        try:
            body = pos.get_dashboard_stats()
        except AuthenticationExpired as e:
            print(f"Your session has expired. Please log in again at {e.login_route}")
            return EXIT_AUTH
        except APIError as e:
            print(f"Error: {e.message}")
            return EXIT_ERROR
        stats = unwrap_item(body) or (body if isinstance(body, dict) else {})
        print("POS Dashboard")
        print("=" * 13)
        for key, value in stats.items():
            print(f"  {key.replace('_', ' ').capitalize():24} {value}")
        return EXIT_OK

    if args.pos_command == "products":
        cycle = PaginatedFetchCycle(
            lambda page, per_page, filters: pos.get_products({"page": page, "per_page": per_page}),
            normalize_product, per_page=20, name="pos products")
        page = ProductGridPage(cycle, settings.currency)
        page.title = "POS Products"
        page.set_page(args.page)
        print(page.render())
        return page_exit_code(cycle)

    if args.pos_command == "orders":
        return show(RecordListPage(
            "Orders", pos.get_orders, as_mapping,
            lambda o: f"{o.get('order_number') or o.get('id')} | {o.get('status', 'pending')} | {o.get('total', 0)}",
            "No orders yet."))

    if args.pos_command == "inventory":
        return show(RecordListPage(
            "Inventory", pos.get_inventory, normalize_product,
            lambda p: f"{p.name or p.id} | SKU {p.sku or '-'} | {p.stock_quantity} in stock",
            "No inventory records."))

    if args.pos_command == "customers":
        return show(RecordListPage(
            "Customers", lambda: pos.search_customers(args.query), as_mapping,
            lambda c: f"{c.get('name', 'Customer')} | {c.get('email', '')} | {c.get('phone', '')}",
            "No matching customers."))

    if args.pos_command == "sale":
        return run_sale(args, pos)

    raise ValueError(f"Unknown POS command: {args.pos_command}")


def run_sale(args: argparse.Namespace, pos: POSService) -> int:
    try:
        wanted = parse_sale_items(args.item)
    except ValueError as e:
        print(f"ERROR: {e}")
        return EXIT_ERROR

    catalog = PaginatedFetchCycle(
        lambda page, per_page, filters: pos.get_products({"page": page, "per_page": per_page}),
        normalize_product, per_page=100, name="pos products")
    catalog.load()
    if catalog.redirect_to:
        print(f"Your session has expired. Please log in again at {catalog.redirect_to}")
        return EXIT_AUTH
    if catalog.error:
        print(f"Error: {catalog.error}")
        return EXIT_ERROR

    by_id = {product.id: product for product in catalog.items}
    cart = PosCart(tax_rate=args.tax)
    for product_id, quantity in wanted:
        product = by_id.get(product_id)
        if product is None:
            print(f"ERROR: Product not found: {product_id}")
            return EXIT_ERROR
        cart.add(product, quantity)

    print(cart.render_receipt(args.discount))
    try:
        order = cart.checkout(pos, args.payment, args.customer, args.discount)
    except AuthenticationExpired as e:
        print(f"Your session has expired. Please log in again at {e.login_route}")
        return EXIT_AUTH
    except APIError as e:
        print(f"Sale failed: {e.message}")
        return EXIT_ERROR

    print(f"\nSale complete. Order {order.get('order_number') or order.get('id') or ''}".rstrip())
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    settings = load_settings()
    if args.api_url:
        settings.api_url = args.api_url
    if args.pos_api_url:
        settings.pos_api_url = args.pos_api_url

    store = FileTokenStore(settings.auth_path)

    if args.command in ("login", "logout"):
        auth = pos_auth(store) if args.pos else storefront_auth(store)
        if args.command == "login":
            auth.login(args.token)
            print("Token saved.")
        else:
            auth.expire()
            print("Logged out.")
        return EXIT_OK

    if args.command == "pos":
        client = MarketplaceAPIClient(settings.pos_api_url, auth=pos_auth(store),
                                      timeout=settings.timeout, max_retries=settings.max_retries)
        with client:
            return run_pos(args, settings, client)

    client = MarketplaceAPIClient(settings.api_url, auth=storefront_auth(store),
                                  timeout=settings.timeout, max_retries=settings.max_retries)
    with client:
        return run_storefront(args, settings, client)


if __name__ == "__main__":
    sys.exit(main())
