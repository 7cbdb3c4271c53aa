"""Export a registered DH group as PEM parameters using cryptography."""

import argparse
from pathlib import Path

from dhkx.common.config import get_group_id, get_params_dir
from dhkx.crypto.interop import parameters_to_pem
from dhkx.crypto.registry import get_group


def export_group(group_id: int, output_dir: str = "params") -> Path:
    """Write the group's parameters to <output_dir>/dh_group<id>.pem.

    Args:
        group_id: Registry group ID (0 for default)
        output_dir: Directory to store the PEM file

    Returns:
        Path of the written file
    """
    group = get_group(group_id)

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    pem_path = output_path / f"dh_group{int(group.group_id)}.pem"
    with open(pem_path, "wb") as f:
        f.write(parameters_to_pem(group))

    print("✓ DH parameters exported")
    print(f"  Group: {int(group.group_id)} ({group.prime.bit_length()} bits)")
    print(f"  File: {pem_path}")
    return pem_path


def main():
    parser = argparse.ArgumentParser(description="Export DH group parameters")
    parser.add_argument("--group", type=int, default=None, help="Group ID (defaults to DH_GROUP_ID)")
    parser.add_argument("--out", default=None, help="Output directory (defaults to DH_PARAMS_DIR)")

    args = parser.parse_args()
    group_id = args.group if args.group is not None else get_group_id()
    export_group(group_id, args.out or get_params_dir())


if __name__ == "__main__":
    main()
