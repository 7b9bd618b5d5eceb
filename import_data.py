# import_data.py
import logging
import sys

from config import load_settings
from image_uploader import ImageUploader
from importer import ProductImporter
from storage import SanityStorage

logger = logging.getLogger("product-importer")


def build_importer(settings) -> ProductImporter:
    storage = SanityStorage(project_id=settings.project_id,
                            dataset=settings.dataset,
                            token=settings.token,
                            api_version=settings.api_version)
    return ProductImporter(storage, ImageUploader(storage), products_url=settings.products_url)


def main() -> int:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    for name in settings.missing():
        logger.warning("%s not set; Sanity calls will fail at runtime", name)

    try:
        build_importer(settings).run()
    except Exception:
        logger.exception("Error importing data")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
