import logging
import threading
from fastapi import FastAPI, HTTPException

from config import load_settings
from import_data import build_importer
from schema import SCHEMA_TYPES

settings = load_settings()

# logging / observability
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("product-importer.api")

app = FastAPI(title="Sanity Product Importer")

for name in settings.missing():
    logger.warning("%s not set; Sanity calls will fail at runtime", name)

importer = build_importer(settings)
# at most one import runs at a time
import_lock = threading.Lock()


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/schema")
def schema():
    return {"types": SCHEMA_TYPES}


@app.post("/import")
def run_import():
    if not import_lock.acquire(blocking=False):
        raise HTTPException(status_code=409, detail="An import is already running")
    try:
        logger.info("Import triggered over HTTP")
        created = importer.run()
        return {"created": [doc.get("_id") for doc in created]}
    except Exception as e:
        logger.exception("Error in import endpoint")
        raise HTTPException(status_code=500, detail=str(e))
    finally:
        import_lock.release()
