"""Command-line interface for tagcart.

Usage:
    tagcart checkout [products.json] [--rules rules.toml]
    tagcart checkout [products.json] --default-rules --format beancount
    tagcart rules [--rules rules.toml]
"""
