#!/usr/bin/env python3
"""Print nearby parking locations with their current occupancy status.

Runs one list refresh cycle (places search, distance ranking, vote
aggregation) and prints the resulting rows.

Usage
-----
Set environment variables and run::

    export PARKSTATUS_PLACES_API_KEY="..."
    export PARKSTATUS_PROJECT_ID="my-project"
    python scripts/nearby_status.py --lat 50.2649 --lng 19.0238

Options::

    --lat/--lng          Observer position (default: fallback center)
    --map                Use the map search radius instead of the list one
    --location ID        Only print the status of this location
    --json               Output as machine-readable JSON
    --verbose            Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from parkstatus import ParkStatusClient, ParkStatusConfig, Position  # noqa: E402


async def main() -> None:
    parser = argparse.ArgumentParser(description="Show nearby parking occupancy.")
    parser.add_argument("--lat", type=float, help="Observer latitude")
    parser.add_argument("--lng", type=float, help="Observer longitude")
    parser.add_argument("--map", action="store_true", dest="map_mode", help="Use the map search radius")
    parser.add_argument("--location", help="Only print the status of this location id")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    observer = None
    if args.lat is not None and args.lng is not None:
        observer = Position(latitude=args.lat, longitude=args.lng)

    config = ParkStatusConfig.from_env()
    async with ParkStatusClient(config) as client:
        if args.location:
            result = await client.location_status(args.location)
            if args.json_mode:
                print(result.model_dump_json(indent=2))
            else:
                print(f"{args.location}: {result.label}")
            return

        if args.map_mode:
            rows = await client.refresh_map(observer)
        else:
            rows = await client.refresh_list(observer)

    if args.json_mode:
        print(json.dumps([row.model_dump(mode="json") for row in rows], indent=2, ensure_ascii=False))
        return

    if not rows:
        print("No parking locations found.")
        return
    for row in rows:
        print(f"{row.status_glyph} {row.display_name:<40} {row.display_distance:>8}  {row.status_text}")


if __name__ == "__main__":
    asyncio.run(main())
