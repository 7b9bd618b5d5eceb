import logging
import requests

logger = logging.getLogger("product-importer.storage")


class SanityError(RuntimeError):
    pass


class SanityStorage:
    def __init__(self, project_id: str, dataset: str, token: str, api_version: str = "2021-06-07"):
        self.project_id = project_id
        self.dataset = dataset
        self.token = token
        self.base = f"https://{project_id}.api.sanity.io/v{api_version}"

    def _headers(self, content_type: str = "application/json"):
        return {"Authorization": f"Bearer {self.token}", "Content-Type": content_type}

    def upload_asset(self, kind: str, data: bytes, filename: str = None, content_type: str = None) -> dict:
        """
        Upload a binary asset ("image" or "file") and return its asset document.
        """
        url = f"{self.base}/assets/{kind}s/{self.dataset}"
        params = {"filename": filename} if filename else None
        resp = requests.post(url, data=data, params=params,
                             headers=self._headers(content_type or "application/octet-stream"))
        resp.raise_for_status()
        asset = resp.json().get("document") or {}
        if "_id" not in asset:
            raise SanityError(f"Asset upload returned no id: {resp.text[:300]}")
        logger.debug("Uploaded %s asset %s", kind, asset["_id"])
        return asset

    def create(self, doc: dict) -> dict:
        url = f"{self.base}/data/mutate/{self.dataset}"
        params = {"returnIds": "true", "returnDocuments": "true"}
        resp = requests.post(url, json={"mutations": [{"create": doc}]}, params=params,
                             headers=self._headers())
        resp.raise_for_status()
        results = resp.json().get("results") or []
        if not results or not results[0].get("id"):
            raise SanityError(f"Create returned no id: {resp.text[:300]}")
        created = results[0].get("document") or {**doc, "_id": results[0]["id"]}
        return created
