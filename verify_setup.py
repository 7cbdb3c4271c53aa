#!/usr/bin/env python3
"""Verify that the dhkx setup is correct."""

import sys
from pathlib import Path


def check_file(path, description):
    """Check if a file exists."""
    if Path(path).exists():
        print(f"✓ {description}: {path}")
        return True
    else:
        print(f"✗ {description} missing: {path}")
        return False


def check_import(module, description):
    """Check if a module can be imported."""
    try:
        __import__(module)
        print(f"✓ {description}")
        return True
    except ImportError:
        print(f"✗ {description} not installed")
        return False


def main():
    """Verify setup."""
    print("dhkx Setup Verification\n")
    print("=" * 50)

    errors = []

    # Check Python version
    if sys.version_info < (3, 9):
        print("✗ Python 3.9+ required")
        errors.append("Python version")
    else:
        print(f"✓ Python version: {sys.version_info.major}.{sys.version_info.minor}")

    # Check required files
    print("\nChecking files...")
    files_to_check = [
        ("pyproject.toml", "Project file"),
        ("requirements.txt", "Requirements file"),
        ("env.example", "Environment example file"),
        ("dhkx/crypto/group.py", "DH group implementation"),
        ("dhkx/crypto/key.py", "DH key implementation"),
        ("dhkx/crypto/registry.py", "Group registry"),
        ("scripts/dh_exchange.py", "Exchange demo script"),
        ("scripts/export_params.py", "Parameter export script"),
    ]

    for file_path, description in files_to_check:
        if not check_file(file_path, description):
            errors.append(f"{description} ({file_path})")

    if not Path(".env").exists():
        print("\n⚠ No .env file, defaults will be used. To customize:")
        print("  cp env.example .env")

    # Check imports
    print("\nChecking Python imports...")
    for module, description in (
        ("cryptography", "cryptography library"),
        ("pydantic", "pydantic library"),
        ("dotenv", "python-dotenv library"),
    ):
        if not check_import(module, description):
            errors.append(description)

    if not errors:
        print("\nChecking default group...")
        from dhkx.crypto.registry import get_group
        group = get_group(0)
        key = group.generate_private_key()
        print(f"✓ Group {int(group.group_id)}: {len(key.marshal_public_key())}-byte public values")

    # Summary
    print("\n" + "=" * 50)
    if errors:
        print(f"\n⚠ Found {len(errors)} issue(s):")
        for error in errors:
            print(f"  - {error}")
        print("\nPlease fix the issues above before using the library.")
        return 1
    else:
        print("\n✓ Setup verification complete! Everything looks good.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
