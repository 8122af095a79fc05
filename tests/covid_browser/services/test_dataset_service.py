from __future__ import annotations

import threading
import time
from pathlib import Path

import pandas as pd
import pytest

from covid_browser.config.model import DatasetConfig
from covid_browser.core.dataset import Dataset
from covid_browser.core.exceptions import DatasetConfigError
from covid_browser.services import dataset_service
from covid_browser.services.dataset_service import DatasetManager


def _make_cfgs(tmp_path: Path, *names: str) -> dict[str, DatasetConfig]:
    return {
        name: DatasetConfig.from_raw({"name": name, "source": f"{name}.csv"}, tmp_path / f"{name}.json", i)
        for i, name in enumerate(names)
    }


@pytest.fixture
def load_calls(monkeypatch):
    """Replace the real loader with one that counts calls per dataset."""
    calls: list[str] = []

    def fake_from_config(cfg, data_root=None):
        calls.append(cfg.name)
        time.sleep(0.01)
        frame = pd.DataFrame({"county": ["Dakota"], "date": ["2021-01-01"], "cases": [1]})
        return Dataset(name=cfg.name, frame=frame)

    monkeypatch.setattr(dataset_service, "from_config", fake_from_config)
    return calls


def test_dataset_is_loaded_lazily_and_once(tmp_path, load_calls):
    manager = DatasetManager(_make_cfgs(tmp_path, "b", "a"))

    assert load_calls == []
    assert not manager.is_loaded("a")

    first = manager["a"]
    second = manager["a"]

    assert first is second
    assert load_calls == ["a"]
    assert manager.is_loaded("a")
    assert not manager.is_loaded("b")


def test_concurrent_first_requests_load_once(tmp_path, load_calls):
    manager = DatasetManager(_make_cfgs(tmp_path, "a"))
    results: list[Dataset] = []

    threads = [threading.Thread(target=lambda: results.append(manager["a"])) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert load_calls == ["a"]
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_mapping_interface(tmp_path, load_calls):
    manager = DatasetManager(_make_cfgs(tmp_path, "b", "a"))

    assert len(manager) == 2
    assert "a" in manager
    assert "zzz" not in manager
    assert manager.names() == ["a", "b"]
    assert manager.get("zzz") is None
    assert load_calls == []

    with pytest.raises(KeyError):
        manager["zzz"]


def test_load_errors_propagate_and_are_not_cached(tmp_path, monkeypatch):
    attempts: list[str] = []

    def failing_from_config(cfg, data_root=None):
        attempts.append(cfg.name)
        raise DatasetConfigError("source file not found")

    monkeypatch.setattr(dataset_service, "from_config", failing_from_config)
    manager = DatasetManager(_make_cfgs(tmp_path, "a"))

    with pytest.raises(DatasetConfigError):
        manager["a"]
    with pytest.raises(DatasetConfigError):
        manager.get("a")

    assert attempts == ["a", "a"]
    assert not manager.is_loaded("a")
