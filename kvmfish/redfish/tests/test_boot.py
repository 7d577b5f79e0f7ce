from __future__ import annotations

import threading

import pytest

from kvmfish.errors import InvalidBootTarget
from kvmfish.redfish.services.boot import DEFAULT_ALLOWABLE_TARGETS, BootOverrideStore


def test_defaults():
    cfg = BootOverrideStore().get()
    assert (cfg.enabled, cfg.mode, cfg.target) == ("Disabled", "UEFI", "None")
    assert cfg.allowable_targets == DEFAULT_ALLOWABLE_TARGETS
    doc = cfg.to_dict()
    assert doc["BootSourceOverrideTarget@Redfish.AllowableValues"][0] == "None"
    assert "UefiBootNext" in doc["BootSourceOverrideTarget@Redfish.AllowableValues"]
    assert doc["BootSourceOverrideEnabled@Redfish.AllowableValues"] == ["Disabled", "Once", "Continuous"]


def test_patch_target_only():
    store = BootOverrideStore()
    store.apply_patch(target="Pxe")
    cfg = store.get()
    assert cfg.target == "Pxe"
    assert (cfg.enabled, cfg.mode) == ("Disabled", "UEFI")


def test_invalid_target_leaves_store_unchanged():
    store = BootOverrideStore()
    store.apply_patch(enabled="Once", mode="Legacy", target="Usb")
    before = store.get()
    with pytest.raises(InvalidBootTarget):
        store.apply_patch(enabled="Continuous", mode="UEFI", target="Bogus")
    after = store.get()
    assert (after.enabled, after.mode, after.target) == ("Once", "Legacy", "Usb")
    assert after == before


def test_enabled_and_mode_written_through():
    store = BootOverrideStore()
    store.apply_patch(enabled="Whatever", mode="Custom")
    cfg = store.get()
    assert (cfg.enabled, cfg.mode, cfg.target) == ("Whatever", "Custom", "None")


def test_empty_fields_are_absent():
    store = BootOverrideStore()
    store.apply_patch(enabled="", mode=None, target="")
    assert store.get() == BootOverrideStore().get()


def test_snapshot_is_immutable():
    store = BootOverrideStore()
    snap = store.get()
    store.apply_patch(target="Cd")
    assert snap.target == "None"
    assert store.get().target == "Cd"


def test_from_config():
    store = BootOverrideStore.from_config({"enabled": "Once", "target": "Hdd", "allowable_targets": ["None", "Hdd"]})
    cfg = store.get()
    assert (cfg.enabled, cfg.mode, cfg.target) == ("Once", "UEFI", "Hdd")
    with pytest.raises(InvalidBootTarget):
        store.apply_patch(target="Pxe")
    with pytest.raises(ValueError):
        BootOverrideStore(target="Floppy")


def test_concurrent_patches_keep_target_allowed():
    store = BootOverrideStore()
    targets = ["Pxe", "Bogus", "Cd", "Nope", "Usb"] * 20

    def patch(t):
        try:
            store.apply_patch(enabled="Once", target=t)
        except InvalidBootTarget:
            pass

    threads = [threading.Thread(target=patch, args=(t,)) for t in targets]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert store.get().target in ("Pxe", "Cd", "Usb")
