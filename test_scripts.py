#!/usr/bin/env python3
"""Test the exchange demo and parameter export scripts."""

import sys
import tempfile
from pathlib import Path

from dhkx.crypto.interop import group_from_pem
from dhkx.crypto.registry import get_group
from scripts.dh_exchange import run_exchange
from scripts.export_params import export_group


def test_run_exchange():
    assert run_exchange(2)
    assert run_exchange(0)


def test_export_group():
    with tempfile.TemporaryDirectory() as tmp:
        pem_path = export_group(14, tmp)
        assert pem_path == Path(tmp) / "dh_group14.pem"
        with open(pem_path, "rb") as f:
            assert group_from_pem(f.read()) == get_group(14)


def test_export_default_group_name():
    with tempfile.TemporaryDirectory() as tmp:
        assert export_group(0, tmp).name == "dh_group14.pem"


if __name__ == "__main__":
    print("=" * 60)
    print("Script Tests")
    print("=" * 60)

    failed = 0
    for name, func in list(globals().items()):
        if name.startswith("test_") and callable(func):
            try:
                func()
                print(f"✓ {name}")
            except AssertionError as e:
                failed += 1
                print(f"✗ {name}: {e}")

    sys.exit(1 if failed else 0)
