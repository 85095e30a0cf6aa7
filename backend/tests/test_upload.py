import pytest
from botocore.exceptions import ClientError

from realty.core.config import get_settings
from realty.services import storage


class FakeS3:
    def __init__(self, fail=False):
        self.fail = fail
        self.put_calls = []
        self.presign_calls = []

    def put_object(self, **kwargs):
        if self.fail:
            raise ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")
        self.put_calls.append(kwargs)
        return {}

    def generate_presigned_url(self, operation, Params, ExpiresIn):
        self.presign_calls.append((operation, Params, ExpiresIn))
        return f"https://s3.example.test/{Params['Bucket']}/{Params['Key']}?signature=abc"


@pytest.fixture
def fake_s3(monkeypatch):
    fake = FakeS3()
    monkeypatch.setattr(storage, "get_s3_client", lambda: fake)
    return fake


def test_upload_stores_image_publicly(client, auth_headers, fake_s3):
    res = client.post(
        "/api/upload",
        files={"file": ("my photo.png", b"\x89PNG fake bytes", "image/png")},
        headers=auth_headers,
    )
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["key"].startswith("real-estate/")
    assert body["key"].endswith("-my-photo.png")
    assert body["url"] == f"https://s3.example.test/listings/{body['key']}"

    call = fake_s3.put_calls[0]
    assert call["Bucket"] == "listings"
    assert call["ACL"] == "public-read"
    assert call["ContentType"] == "image/png"
    assert call["Body"] == b"\x89PNG fake bytes"


def test_upload_requires_admin(client, fake_s3):
    res = client.post("/api/upload", files={"file": ("a.png", b"x", "image/png")})
    assert res.status_code == 401
    assert fake_s3.put_calls == []


def test_upload_rejects_non_images(client, auth_headers, fake_s3):
    res = client.post("/api/upload", files={"file": ("notes.pdf", b"%PDF", "application/pdf")}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid file type. Only images are allowed."}


def test_upload_rejects_missing_file(client, auth_headers, fake_s3):
    res = client.post("/api/upload", headers=auth_headers)
    assert res.status_code == 400


def test_upload_rejects_oversized_file(client, auth_headers, fake_s3, monkeypatch):
    monkeypatch.setattr(get_settings(), "UPLOAD_MAX_BYTES", 8)
    res = client.post("/api/upload", files={"file": ("big.jpg", b"0123456789", "image/jpeg")}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json() == {"message": "File size exceeds 10MB limit"}
    assert fake_s3.put_calls == []


def test_upload_storage_failure_is_bad_gateway(client, auth_headers, fake_s3):
    fake_s3.fail = True
    res = client.post("/api/upload", files={"file": ("a.webp", b"RIFF", "image/webp")}, headers=auth_headers)
    assert res.status_code == 502
    assert res.json() == {"message": "Failed to upload file to storage"}


def test_upload_without_storage_configuration(client, auth_headers, fake_s3, monkeypatch):
    monkeypatch.setattr(get_settings(), "S3_BUCKET_NAME", "")
    res = client.post("/api/upload", files={"file": ("a.gif", b"GIF89a", "image/gif")}, headers=auth_headers)
    assert res.status_code == 503


def test_presigned_upload_url(client, auth_headers, fake_s3):
    res = client.get(
        "/api/upload",
        params={"filename": "plan.jpg", "contentType": "image/jpeg"},
        headers=auth_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["uploadUrl"].startswith("https://s3.example.test/listings/real-estate/")
    assert body["fileUrl"].startswith("https://s3.example.test/listings/real-estate/")
    assert body["fileUrl"].endswith("-plan.jpg")

    operation, params, expires = fake_s3.presign_calls[0]
    assert operation == "put_object"
    assert params["ContentType"] == "image/jpeg"
    assert expires == 3600


def test_presigned_upload_requires_filename(client, auth_headers, fake_s3):
    res = client.get("/api/upload", headers=auth_headers)
    assert res.status_code == 400
    assert res.json() == {"message": "Filename is required"}
