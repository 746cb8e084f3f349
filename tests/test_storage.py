"""Session file, signal bus and the storage watcher."""

import asyncio
import json

import pytest

from moto_admin.signals import STORAGE_CHANGED, SignalBus, StorageWatcher


class TestSessionStore:
    def test_save_and_load(self, store):
        store.save("tok", {"email": "ada@shop.test"})
        assert store.token == "tok"
        assert store.user == {"email": "ada@shop.test"}
        assert json.loads(store.path.read_text())["token"] == "tok"

    def test_missing_file_is_empty(self, store):
        assert store.token is None
        assert store.user is None
        assert store.fingerprint() is None

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"token": 5}'])
    def test_corrupt_file_is_empty(self, store, content):
        store.path.write_text(content)
        assert store.token is None

    def test_clear_is_idempotent(self, store):
        store.save("tok")
        store.clear()
        store.clear()
        assert store.token is None
        assert not store.path.exists()

    def test_atomic_write_leaves_no_temp_file(self, store):
        store.save("tok")
        assert [p.name for p in store.path.parent.iterdir()] == ["session.json"]


class TestSignalBus:
    def test_unsubscribe(self):
        bus = SignalBus()
        seen = []
        unsubscribe = bus.subscribe("x", lambda **p: seen.append(p))

        bus.emit("x", n=1)
        unsubscribe()
        unsubscribe()
        bus.emit("x", n=2)

        assert seen == [{"n": 1}]
        assert bus.listener_count("x") == 0

    def test_failing_handler_does_not_block_others(self):
        bus = SignalBus()
        seen = []

        def broken(**_):
            raise RuntimeError("boom")

        bus.subscribe("x", broken)
        bus.subscribe("x", lambda **p: seen.append(p))
        bus.emit("x", status=401)

        assert seen == [{"status": 401}]


class TestStorageWatcher:
    def test_own_writes_are_not_reported(self, store, signals):
        seen = []
        signals.subscribe(STORAGE_CHANGED, lambda **p: seen.append(p))
        watcher = StorageWatcher(store, signals)

        store.save("tok")
        assert watcher.poll() is False
        store.clear()
        assert watcher.poll() is False
        assert seen == []

    def test_external_writes_are_reported(self, store, signals):
        seen = []
        signals.subscribe(STORAGE_CHANGED, lambda **p: seen.append(p))
        store.save("tok")
        watcher = StorageWatcher(store, signals)

        store.path.write_text(json.dumps({"token": "written-by-another-shell"}))
        assert watcher.poll() is True
        assert watcher.poll() is False

        store.path.unlink()
        assert watcher.poll() is True
        assert seen == [{"external": True}, {"external": True}]

    @pytest.mark.asyncio
    async def test_start_and_stop(self, store, signals):
        seen = []
        signals.subscribe(STORAGE_CHANGED, lambda **p: seen.append(p))
        watcher = StorageWatcher(store, signals, interval=0.01)

        watcher.start()
        assert watcher.running
        store.path.write_text(json.dumps({"token": "external"}))
        for _ in range(50):
            if seen:
                break
            await asyncio.sleep(0.01)
        await watcher.stop()

        assert seen == [{"external": True}]
        assert not watcher.running

    def test_external_deletion_is_reported_when_never_written_here(self, store, signals):
        seen = []
        signals.subscribe(STORAGE_CHANGED, lambda **p: seen.append(p))
        store.path.write_text(json.dumps({"token": "from-another-shell"}))
        assert store.token == "from-another-shell"
        watcher = StorageWatcher(store, signals)

        store.path.unlink()

        assert watcher.poll() is True
        assert seen == [{"external": True}]

    def test_own_change_is_consumed_once(self, store, signals):
        seen = []
        signals.subscribe(STORAGE_CHANGED, lambda **p: seen.append(p))
        watcher = StorageWatcher(store, signals)

        store.save("tok")
        assert watcher.poll() is False
        store.path.unlink()
        assert watcher.poll() is True
        assert seen == [{"external": True}]
