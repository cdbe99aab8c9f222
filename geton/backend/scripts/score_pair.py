from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from app.service_layer.demo_seed import demo_property, demo_renters
from app.service_layer.scoring import rank_for_property, score_pair


def _load(path: str) -> dict[str, Any]:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main() -> None:
    parser = argparse.ArgumentParser(description="Score renter/property compatibility")
    parser.add_argument("--renter", help="Path to a renter profile JSON file")
    parser.add_argument("--property", help="Path to a property JSON file")
    parser.add_argument("--demo", action="store_true", help="Rank the built-in demo renters against the demo property")
    parser.add_argument("--filter", default="all", choices=["all", "high_match", "has_guarantor", "no_pets"])
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if args.demo:
        result = rank_for_property(demo_property(), demo_renters(), filter_by=args.filter)
        for r in result.renters:
            c = r.compatibility
            print(r.renter_id, c.formatted, c.tier.label, c.explain)
        return

    if not args.renter or not args.property:
        parser.error("--renter and --property are required unless --demo is given")

    out = score_pair(_load(args.renter), _load(args.property))
    print(out.formatted, out.tier.label)
    print(out.explain)
    for f in out.flags:
        print(f"  [{f.type}] {f.description}")


if __name__ == "__main__":
    main()
