"""
Tests for JSON file storage.
"""

import json
from pathlib import Path

import pytest

from adtracker.common.exceptions import ConfigError, StorageError
from adtracker.common.storage import Dataset, JsonFileStorage
from adtracker.models import Ad, RevenueEntry


@pytest.fixture
def dataset() -> Dataset:
    ad = Ad(
        id="a1",
        name="Banner A",
        platform="Google",
        type="banner",
        created_at="2024-05-01T12:30:00.000Z",
    )
    entry = RevenueEntry(
        id="r1",
        ad_id="a1",
        amount=10.5,
        impressions=1000,
        clicks=50,
        date="2024-05-01",
        created_at="2024-05-01T12:30:00.000Z",
    )
    return Dataset(ads=[ad], revenue=[entry])


def test_missing_file_is_empty(tmp_path: Path) -> None:
    dataset = JsonFileStorage(tmp_path / "nope.json").load()
    assert dataset.ads == []
    assert dataset.revenue == []


def test_document_layout(tmp_path: Path, dataset: Dataset) -> None:
    path = tmp_path / "data.json"
    JsonFileStorage(path).save(dataset)

    document = json.loads(path.read_text())

    assert set(document) == {"ads", "revenue"}
    assert document["ads"] == [
        {
            "id": "a1",
            "name": "Banner A",
            "platform": "Google",
            "type": "banner",
            "createdAt": "2024-05-01T12:30:00.000Z",
        }
    ]
    assert document["revenue"] == [
        {
            "id": "r1",
            "adId": "a1",
            "amount": 10.5,
            "impressions": 1000,
            "clicks": 50,
            "date": "2024-05-01",
            "createdAt": "2024-05-01T12:30:00.000Z",
        }
    ]


def test_round_trip(tmp_path: Path, dataset: Dataset) -> None:
    storage = JsonFileStorage(tmp_path / "data.json")
    storage.save(dataset)

    loaded = storage.load()

    assert loaded.ads == dataset.ads
    assert loaded.revenue == dataset.revenue


def test_save_creates_parent_dirs(tmp_path: Path, dataset: Dataset) -> None:
    path = tmp_path / "nested" / "dir" / "data.json"
    JsonFileStorage(path).save(dataset)
    assert path.exists()


def test_save_leaves_no_temp_files(tmp_path: Path, dataset: Dataset) -> None:
    storage = JsonFileStorage(tmp_path / "data.json")
    storage.save(dataset)
    storage.save(Dataset())

    assert [p.name for p in tmp_path.iterdir()] == ["data.json"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"ads": [{"id": "x"}]}'])
def test_malformed_file_is_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "data.json"
    path.write_text(content)

    dataset = JsonFileStorage(path).load()

    assert dataset.ads == []
    assert dataset.revenue == []


def test_save_failure_raises_storage_error(
    tmp_path: Path, dataset: Dataset, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "data.json"
    storage = JsonFileStorage(path)
    storage.save(Dataset())

    def broken_replace(src, dst) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("adtracker.common.storage.os.replace", broken_replace)

    with pytest.raises(StorageError):
        storage.save(dataset)

    # Previous snapshot untouched, temp file cleaned up
    assert storage.load().ads == []
    assert [p.name for p in tmp_path.iterdir()] == ["data.json"]


def test_directory_path_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        JsonFileStorage(tmp_path)


def test_is_writable(tmp_path: Path) -> None:
    assert JsonFileStorage(tmp_path / "data.json").is_writable()
    assert not JsonFileStorage(tmp_path / "missing" / "data.json").is_writable()


def test_unencodable_value_raises_storage_error(tmp_path: Path, dataset: Dataset) -> None:
    path = tmp_path / "data.json"
    storage = JsonFileStorage(path)
    storage.save(dataset)
    before = path.read_bytes()

    oversized = dataset.revenue[0].model_copy(update={"impressions": 2**64})

    with pytest.raises(StorageError):
        storage.save(Dataset(ads=dataset.ads, revenue=[oversized]))

    assert path.read_bytes() == before
    assert [p.name for p in tmp_path.iterdir()] == ["data.json"]
