# nosec B101


import json
from pathlib import Path

import pytest

from domain.exceptions.rates import FallbackError
from infrastructure.fallback.snapshot import SnapshotLoader


SHIPPED_SNAPSHOT = Path(__file__).resolve().parents[4] / 'data' / 'sample_sk.json'


@pytest.mark.asyncio
async def test_load_returns_parsed_json(tmp_path):
    payload = {'base': 'EUR', 'rates': {'2024-01-02': {'USD': 1.0956}}}
    path = tmp_path / 'snapshot.json'
    path.write_text(json.dumps(payload), encoding='utf-8')

    result = await SnapshotLoader(path).load()

    assert result == payload


@pytest.mark.asyncio
async def test_load_accepts_string_path(tmp_path):
    path = tmp_path / 'snapshot.json'
    path.write_text('{"rates": {}}', encoding='utf-8')

    result = await SnapshotLoader(str(path)).load()

    assert result == {'rates': {}}


@pytest.mark.asyncio
async def test_missing_file_raises_fallback_error(tmp_path):
    loader = SnapshotLoader(tmp_path / 'does-not-exist.json')

    with pytest.raises(FallbackError) as exc_info:
        await loader.load()

    assert 'Cannot read fallback file' in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.asyncio
async def test_invalid_json_raises_fallback_error(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{ not json', encoding='utf-8')

    with pytest.raises(FallbackError) as exc_info:
        await SnapshotLoader(path).load()

    assert 'Invalid JSON' in str(exc_info.value)


@pytest.mark.asyncio
async def test_non_utf8_file_raises_fallback_error(tmp_path):
    path = tmp_path / 'latin1.json'
    path.write_bytes(b'{"rates": {"2024-01-02": {"USD": 1.1\xff}}}')

    with pytest.raises(FallbackError) as exc_info:
        await SnapshotLoader(path).load()

    assert 'Cannot read fallback file' in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


@pytest.mark.asyncio
async def test_shipped_snapshot_is_loadable():
    result = await SnapshotLoader(SHIPPED_SNAPSHOT).load()

    assert result['base'] == 'EUR'
    assert all('USD' in quotes for quotes in result['rates'].values())
