#!/usr/bin/env python3
"""
Demo script for estate search.

Seeds Redis with estates (from a JSON file, or a small generated grid when
no file is given), then runs a polygon search and a few cached lookups.

Usage:
    python scripts/demo.py [estates.json]

The JSON file must hold an array of objects with the EstateEntity fields.
"""

import json
import sys
import time
from pathlib import Path

from estate_search import (
    EstateCache,
    EstateEntity,
    EstateService,
    NazotteService,
    NotFoundError,
    Polygon,
    RedisEstateRepository,
    StorageError,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def load_estates(path: Path) -> list[EstateEntity]:
    """Load estates from a JSON array."""
    with path.open(encoding="utf-8") as f:
        return [EstateEntity(**row) for row in json.load(f)]


def sample_estates() -> list[EstateEntity]:
    """A 10x10 grid of estates around Tokyo station."""
    estates = []
    for i in range(10):
        for j in range(10):
            estate_id = i * 10 + j + 1
            estates.append(
                EstateEntity(
                    id=estate_id,
                    name=f"Sample estate {estate_id}",
                    description="Generated by the demo script",
                    thumbnail=f"/images/estate/{estate_id}.png",
                    address=f"Chiyoda {i}-{j}",
                    latitude=35.67 + i * 0.002,
                    longitude=139.76 + j * 0.002,
                    rent=50000 + (estate_id * 7919) % 100000,
                    door_height=180 + j * 5,
                    door_width=80 + i * 5,
                    features="",
                    popularity=(estate_id * 31) % 97,
                )
            )
    return estates


def demo_seed(repository: RedisEstateRepository, estates: list[EstateEntity]) -> None:
    """Write estates into Redis."""
    print_section("Seeding")

    start = time.time()
    count = repository.save_many(estates)
    print(f"\n📝 Stored {count} estates in {(time.time() - start) * 1000:.1f}ms")


def demo_nazotte(service: NazotteService) -> None:
    """Search inside a triangle drawn over the sample grid."""
    print_section("Polygon Search")

    polygon = Polygon.from_pairs([(35.670, 139.760), (35.688, 139.760), (35.670, 139.778)])

    start = time.time()
    result = service.search_within_polygon(polygon)
    duration = (time.time() - start) * 1000

    print(f"\n🔍 {result.count} estates inside the triangle ({duration:.1f}ms)")
    for estate in result.estates[:5]:
        print(f"  #{estate.id:<4} popularity={estate.popularity:<3} ({estate.latitude:.3f}, {estate.longitude:.3f})")


def demo_cached_lookup(service: EstateService, estate_ids: list[int]) -> None:
    """Look the same estates up twice to show the cache at work."""
    print_section("Cached Lookup")

    for attempt in ("cold", "warm"):
        start = time.time()
        for estate_id in estate_ids:
            try:
                service.get_estate(estate_id)
            except NotFoundError:
                print(f"  ✗ estate {estate_id} not found")
        print(f"\n  {attempt}: {len(estate_ids)} lookups in {(time.time() - start) * 1000:.2f}ms")


def main() -> None:
    """Run all demos."""
    print("\n🚀 Estate Search Demo")
    print("=" * 70)

    estates = load_estates(Path(sys.argv[1])) if len(sys.argv) > 1 else sample_estates()
    repository = RedisEstateRepository.create()

    try:
        demo_seed(repository, estates)
        demo_nazotte(NazotteService.create(store=repository))
        demo_cached_lookup(
            EstateService.create(store=repository, cache=EstateCache()),
            [estate.id for estate in estates[:20]],
        )

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except StorageError as e:
        print(f"\n❌ Error: {e}")
        print("\nMake sure Redis is running, or set REDIS_URL to your Redis instance.")
        sys.exit(1)


if __name__ == "__main__":
    main()
