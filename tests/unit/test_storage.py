"""
Unit tests for core/storage_manager.py and core/brand_store.py

Uploads are written to a temporary directory; Supabase is mocked.
"""

import io
import pytest
from unittest.mock import Mock

from core.brand_extractor import BrandProfile, Tone
from core.brand_store import BrandStore
from core.exceptions import ConfigurationError, StorageError
from core.storage_manager import StorageManager


class TestStorageManager:
    """Tests for StorageManager"""

    @pytest.mark.unit
    def test_save_transcript(self, tmp_path):
        stored = StorageManager(str(tmp_path)).save_transcript("Hello world")

        assert stored.filename == f"{stored.id}-transcript.txt"
        assert stored.path == f"/uploads/{stored.filename}"
        assert stored.type == 'transcript'
        assert (tmp_path / stored.filename).read_text(encoding='utf-8') == "Hello world"

    @pytest.mark.unit
    def test_save_media_keeps_extension(self, tmp_path):
        stored = StorageManager(str(tmp_path)).save_media(io.BytesIO(b'abc123'), 'clip.MP4', 'video')

        assert stored.filename == f"{stored.id}-video.MP4"
        assert stored.original_name == 'clip.MP4'
        assert stored.size == 6
        assert (tmp_path / stored.filename).read_bytes() == b'abc123'

    @pytest.mark.unit
    def test_creates_upload_dir(self, tmp_path):
        target = tmp_path / 'nested' / 'uploads'
        StorageManager(str(target)).save_transcript("t")
        assert target.is_dir()

    @pytest.mark.unit
    def test_unique_ids(self, tmp_path):
        storage = StorageManager(str(tmp_path))
        assert storage.save_transcript("a").id != storage.save_transcript("b").id

    @pytest.mark.unit
    def test_to_dict_uses_camel_case(self, tmp_path):
        stored = StorageManager(str(tmp_path)).save_media(io.BytesIO(b'x'), 'a.mp3', 'audio')
        data = stored.to_dict()
        assert data['originalName'] == 'a.mp3'
        assert 'original_name' not in data

    @pytest.mark.unit
    def test_oversized_upload_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setattr('core.storage_manager.Config.MAX_UPLOAD_SIZE_MB', 0)

        with pytest.raises(StorageError):
            StorageManager(str(tmp_path)).save_media(io.BytesIO(b'data'), 'a.mp3', 'audio')

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.unit
    def test_oversized_upload_stops_reading(self, tmp_path, monkeypatch):
        monkeypatch.setattr('core.storage_manager.Config.MAX_UPLOAD_SIZE_MB', 1)
        monkeypatch.setattr(StorageManager, 'CHUNK_SIZE', 512 * 1024)
        source = Mock()
        source.read.return_value = b'x' * (512 * 1024)

        with pytest.raises(StorageError, match="File exceeds maximum size of 1MB"):
            StorageManager(str(tmp_path)).save_media(source, 'a.mp4', 'video')

        assert source.read.call_count == 3
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.unit
    def test_chunked_copy_keeps_all_bytes(self, tmp_path, monkeypatch):
        monkeypatch.setattr(StorageManager, 'CHUNK_SIZE', 4)
        data = b'0123456789abcdef!'

        stored = StorageManager(str(tmp_path)).save_media(io.BytesIO(data), 'a.mp3', 'audio')

        assert stored.size == len(data)
        assert (tmp_path / stored.filename).read_bytes() == data

    @pytest.mark.unit
    def test_failed_read_leaves_no_partial_file(self, tmp_path):
        source = Mock()
        source.read.side_effect = [b'partial', OSError("connection reset")]

        with pytest.raises(StorageError, match="Failed to save file: connection reset"):
            StorageManager(str(tmp_path)).save_media(source, 'a.mp4', 'video')

        assert list(tmp_path.iterdir()) == []


class TestBrandStore:
    """Tests for BrandStore (Supabase mocked)"""

    @pytest.fixture
    def client(self):
        client = Mock()
        table = client.table.return_value
        table.insert.return_value.execute.return_value = Mock(data=[{'id': 'brand-1', 'name': 'Acme'}])
        table.select.return_value.order.return_value.limit.return_value.execute.return_value = Mock(
            data=[{'id': 'brand-1'}, {'id': 'brand-2'}]
        )
        return client

    @pytest.mark.unit
    def test_requires_credentials(self):
        with pytest.raises(ConfigurationError):
            BrandStore(None, 'key')

    @pytest.mark.unit
    def test_save_maps_profile_to_row(self, client):
        store = BrandStore('https://x.supabase.co', 'key', client=client)
        profile = BrandProfile(name='Acme', primary_color='#fff', logo_url='', keywords=['a'], tone=Tone.BOLD)

        row = store.save(profile, 'https://acme.example')

        assert row == {'id': 'brand-1', 'name': 'Acme'}
        client.table.assert_called_with('brands')
        client.table.return_value.insert.assert_called_once_with({
            'name': 'Acme',
            'website_url': 'https://acme.example',
            'primary_color': '#fff',
            'secondary_color': None,
            'logo_url': None,
            'tone': 'bold',
            'keywords': ['a'],
        })

    @pytest.mark.unit
    def test_unknown_brand_name(self):
        assert BrandStore.to_row(BrandProfile(), 'https://x')['name'] == 'Unknown Brand'

    @pytest.mark.unit
    def test_save_failure_raises(self, client):
        client.table.return_value.insert.return_value.execute.side_effect = RuntimeError("boom")

        with pytest.raises(StorageError, match="Failed to save brand: boom"):
            BrandStore('u', 'k', client=client).save(BrandProfile(), 'https://x')

    @pytest.mark.unit
    def test_list_brands(self, client):
        brands = BrandStore('u', 'k', client=client).list_brands(limit=2)
        assert [b['id'] for b in brands] == ['brand-1', 'brand-2']
        client.table.return_value.select.return_value.order.assert_called_once_with('created_at', desc=True)
