import itertools

import pytest


class FakeResponse:
    def __init__(self, json_data=None, content=b"", status_code=200, headers=None, text=""):
        self._json = json_data
        self.content = content
        self.status_code = status_code
        self.headers = headers or {}
        self.text = text

    def json(self):
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeStorage:
    def __init__(self, fail_on_create=None):
        self.uploads = []
        self.created = []
        self.fail_on_create = fail_on_create
        self._ids = itertools.count(1)

    def upload_asset(self, kind, data, filename=None, content_type=None):
        asset = {"_id": f"image-{next(self._ids)}"}
        self.uploads.append({"kind": kind, "data": data, "filename": filename,
                             "content_type": content_type, "_id": asset["_id"]})
        return asset

    def create(self, doc):
        if self.fail_on_create is not None and len(self.created) == self.fail_on_create:
            raise RuntimeError("create failed")
        created = {**doc, "_id": f"doc-{next(self._ids)}"}
        self.created.append(created)
        return created


class FakeUploader:
    def __init__(self, asset_id="image-abc"):
        self.asset_id = asset_id
        self.calls = []

    def upload_from_url(self, url):
        self.calls.append(url)
        return self.asset_id


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so the deletion is undone even if dotenv sets the variable
    for name in ("NEXT_PUBLIC_SANITY_PROJECT_ID", "NEXT_PUBLIC_SANITY_DATASET",
                 "SANITY_API_TOKEN", "SANITY_API_VERSION", "PRODUCTS_URL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
