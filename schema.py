# schema.py
"""
Content schema for the Sanity studio.

Consumed by the studio build when registering document types; the import
script never reads it at runtime.
"""

PRODUCT_SCHEMA = {
    "name": "product",
    "title": "Product",
    "type": "document",
    "fields": [
        {"name": "name", "title": "Name", "type": "string"},
        {"name": "description", "title": "Description", "type": "string"},
        {"name": "price", "title": "Price", "type": "number"},
        {
            "name": "discountPercentage",
            "title": "Discount Percentage",
            "type": "number",
        },
        {
            "name": "priceWithoutDiscount",
            "title": "Price Without Discount",
            "type": "number",
            "description": "Original price before discount",
        },
        {
            "name": "rating",
            "title": "Rating",
            "type": "number",
            "description": "Rating of the product",
        },
        {
            "name": "ratingCount",
            "title": "Rating Count",
            "type": "number",
            "description": "Number of ratings",
        },
        {
            "name": "tags",
            "title": "Tags",
            "type": "array",
            "of": [{"type": "string"}],
            "options": {"layout": "tags"},
            "description": "Add tags like 'new arrival', 'bestseller', etc.",
        },
        {
            "name": "sizes",
            "title": "Sizes",
            "type": "array",
            "of": [{"type": "string"}],
            "options": {"layout": "tags"},
            "description": "Add sizes like S, M, L, XL, XXL",
        },
        {
            "name": "image",
            "title": "Product Image",
            "type": "image",
            "options": {"hotspot": True},
        },
    ],
}

SCHEMA_TYPES = [PRODUCT_SCHEMA]
