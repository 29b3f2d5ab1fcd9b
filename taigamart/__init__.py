"""
Taiga Marketplace Client

Modules:
    models        - Data models (Product, Vendor, Category, content records)
    common        - Shared utilities (config loader, logging, text helpers)
    normalization - Backend response normalization (envelopes, products, catalogue)
    api           - REST client, auth context and storefront/POS services
    pages         - Fetch cycles, forms, storefront pages and POS cart
    cli           - Command-line entry point
"""
