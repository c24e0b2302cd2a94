"""
Tests for local photo storage and key layout
"""
import pytest

from wanderlog.config.settings import StorageSettings
from wanderlog.core.exceptions import PhotoUploadError
from wanderlog.services.photo_storage import (
    LocalPhotoStorage,
    PhotoUpload,
    build_photo_key,
    create_photo_storage,
    photo_extension,
)


def test_build_photo_key():
    assert build_photo_key("travel-photos", 7, "jpg", 1714550400000) == "travel-photos/7/1714550400000.jpg"
    assert build_photo_key("/travel-photos/", 7, "png", 1) == "travel-photos/7/1.png"


@pytest.mark.parametrize("filename,content_type,expected", [
    ("beach.JPG", "image/jpeg", "JPG"),
    ("archive.tar.gz", None, "gz"),
    ("camera-upload", "image/png", "png"),
    ("weird.j p g", None, "bin"),
    ("noext", None, "bin"),
])
def test_photo_extension(filename, content_type, expected):
    assert photo_extension(filename, content_type) == expected


def test_upload_writes_file_and_returns_public_url(tmp_path):
    storage = LocalPhotoStorage(tmp_path, prefix="travel-photos", public_base_url="/media/", clock=lambda: 1714550400.5)

    url = storage.upload(42, PhotoUpload("sunset.png", "image/png", b"png-bytes"))

    assert url == "/media/travel-photos/42/1714550400500.png"
    assert (tmp_path / "travel-photos" / "42" / "1714550400500.png").read_bytes() == b"png-bytes"


def test_delete_removes_file(tmp_path):
    storage = LocalPhotoStorage(tmp_path)
    url = storage.upload(1, PhotoUpload("a.jpg", "image/jpeg", b"x"))

    storage.delete(url)

    assert list(tmp_path.rglob("*.jpg")) == []
    # Second delete is a no-op
    storage.delete(url)


def test_delete_ignores_foreign_url(tmp_path):
    storage = LocalPhotoStorage(tmp_path)
    storage.delete("https://cdn.example.com/travel-photos/1/1.jpg")


def test_upload_failure(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")
    storage = LocalPhotoStorage(blocker)

    with pytest.raises(PhotoUploadError) as exc_info:
        storage.upload(1, PhotoUpload("a.jpg", "image/jpeg", b"x"))

    assert exc_info.value.status_code == 502


def test_create_photo_storage(tmp_path):
    storage = create_photo_storage(StorageSettings(upload_dir=str(tmp_path), photo_prefix="trips"))
    assert isinstance(storage, LocalPhotoStorage)
    assert storage.prefix == "trips"

    with pytest.raises(ValueError):
        create_photo_storage(StorageSettings(backend="s3"))


def test_same_millisecond_uploads_get_distinct_keys(tmp_path):
    storage = LocalPhotoStorage(tmp_path, clock=lambda: 1700000000.123)

    url_a = storage.upload(7, PhotoUpload("a.jpg", "image/jpeg", b"AAAA"))
    url_b = storage.upload(7, PhotoUpload("b.jpg", "image/jpeg", b"BBBB"))

    assert url_a == "/media/travel-photos/7/1700000000123.jpg"
    assert url_b == "/media/travel-photos/7/1700000000124.jpg"
    assert (tmp_path / "travel-photos" / "7" / "1700000000123.jpg").read_bytes() == b"AAAA"
    assert (tmp_path / "travel-photos" / "7" / "1700000000124.jpg").read_bytes() == b"BBBB"


def test_deleting_one_photo_keeps_its_same_millisecond_neighbour(tmp_path):
    storage = LocalPhotoStorage(tmp_path, clock=lambda: 1700000000.123)
    url_a = storage.upload(7, PhotoUpload("a.jpg", "image/jpeg", b"AAAA"))
    url_b = storage.upload(7, PhotoUpload("b.jpg", "image/jpeg", b"BBBB"))

    storage.delete(url_b)

    assert (tmp_path / url_a[len("/media/"):]).read_bytes() == b"AAAA"
