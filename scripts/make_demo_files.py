from __future__ import annotations

import argparse
import os
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

DEMO_FILES = {
    "sangon": [
        "0001_31225060307072_(TXPCR)_[SP1].ab1",
        "0002_31225060307073_(TXPCR)_[SP2].ab1",
        "0003_31225060307074_(GAPDH)_[SP1].ab1",
    ],
    "ruibio": [
        "K528-1.C1.34781340.B08.ab1",
        "K528-2.C1.34781341.B09.ab1",
        "K530-1.T7.34781342.B10.ab1",
    ],
    "genewiz": [
        "TL1-T25_A01.ab1",
        "TL2-T25_A02.ab1",
        "k1-2-C1_R_G04.ab1",
    ],
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Create empty vendor-named .ab1 files to try the wizard on.")
    parser.add_argument("vendor", choices=sorted(DEMO_FILES))
    parser.add_argument(
        "--out",
        default=os.getenv("SANGER_RENAME_DEMO_DIR", "./demo_ab1"),
        help="Target directory (default: %(default)s)",
    )
    args = parser.parse_args()

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    for name in DEMO_FILES[args.vendor]:
        path = out_dir / name
        path.write_bytes(b"ABIF")
        print("created", path)
    print(f"\nTry: sanger-rename --dir {out_dir} --vendor {args.vendor}")


if __name__ == "__main__":
    main()
