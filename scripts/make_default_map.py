"""Write the default 12x12 antenna map."""

import argparse
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maps.loader import DEFAULT_MAP, write_default_map


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        default="data/mapa.bin",
        help="Destination file; '.bin' writes the binary format, anything else text",
    )
    args = parser.parse_args()

    write_default_map(args.output)
    print(f"Default map ({len(DEFAULT_MAP)}x{len(DEFAULT_MAP[0])}) written to {args.output}")


if __name__ == "__main__":
    main()
