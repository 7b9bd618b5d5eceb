"""
Product import pipeline.

Pulls the product catalogue from the source REST API and creates one
`product` document per record in the Sanity dataset:

 1. fetch the whole collection in a single request
 2. for each record, in order: upload its image (if any), build the
    document, create it

Image failures are absorbed by the uploader; a failing fetch or create
propagates and ends the run. Nothing is deduplicated, so re-running the
import creates the same products again.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import BaseModel

from config import DEFAULT_PRODUCTS_URL

logger = logging.getLogger("product-importer")


class Rating(BaseModel):
    rate: Optional[float] = None
    count: Optional[int] = None


class SourceProduct(BaseModel):
    # passed through to the document untouched
    id: Optional[Union[int, str]] = None
    title: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[float] = None
    category: Optional[Any] = None
    image: Optional[str] = None
    rating: Optional[Rating] = None


def fetch_products(url: str = DEFAULT_PRODUCTS_URL) -> List[SourceProduct]:
    resp = requests.get(url)
    resp.raise_for_status()
    return [SourceProduct(**item) for item in resp.json()]


def build_document(product: SourceProduct, asset_id: Optional[str] = None) -> Dict[str, Any]:
    rating = product.rating or Rating()
    doc = {
        "_type": "product",
        "name": product.title,
        "description": product.description,
        "price": product.price,
        "discountPercentage": 0,
        "priceWithoutDiscount": product.price,
        "rating": rating.rate or 0,
        "ratingCount": rating.count or 0,
        "tags": [product.category] if product.category else [],
        "sizes": [],
    }
    # absent source values are left out rather than sent as null
    doc = {k: v for k, v in doc.items() if v is not None}
    if asset_id:
        doc["image"] = {
            "_type": "image",
            "asset": {"_type": "reference", "_ref": asset_id},
        }
    return doc


class ProductImporter:
    def __init__(self, storage, uploader, products_url: str = DEFAULT_PRODUCTS_URL):
        self.storage = storage
        self.uploader = uploader
        self.products_url = products_url

    def import_product(self, product: SourceProduct) -> Dict[str, Any]:
        logger.info("Processing product: %s", product.title)
        asset_id = None
        if product.image:
            asset_id = self.uploader.upload_from_url(product.image)
            if asset_id is None:
                logger.warning("Continuing without image for product: %s", product.title)
        created = self.storage.create(build_document(product, asset_id))
        logger.info("Product created in Sanity: %s", created.get("_id"))
        return created

    def run(self) -> List[Dict[str, Any]]:
        logger.info("Fetching products from %s", self.products_url)
        products = fetch_products(self.products_url)
        logger.info("Fetched %d products", len(products))

        created = [self.import_product(p) for p in products]

        logger.info("Data import completed successfully!")
        return created
