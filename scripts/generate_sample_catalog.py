#!/usr/bin/env python3
"""
Write a sample catalog: one Car<Brand>.json file per brand.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: existing brand files are overwritten
- Realism-lite: prices correlated with model year + brand band

Usage:
    python scripts/generate_sample_catalog.py [output_dir]
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from car_catalog.infra.config import catalog_data_dir, catalog_file_prefix


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
CARS_PER_BRAND = 12
CURRENT_YEAR = 2026


# ==============================================================================
# Brand Data
# ==============================================================================

# Base prices (USD) per brand band
PRICE_BANDS = {
    "economy": (15000, 25000),
    "mid_range": (22000, 40000),
    "premium": (40000, 80000),
}

BRANDS = {
    "Toyota": ("mid_range", ["Corolla", "Camry", "RAV4", "Hilux", "Yaris"]),
    "Honda": ("mid_range", ["Civic", "Accord", "CR-V", "HR-V", "Fit"]),
    "Kia": ("economy", ["Rio", "Forte", "Seltos", "Sportage", "Soul"]),
    "Hyundai": ("economy", ["Accent", "Elantra", "Creta", "Tucson", "Venue"]),
    "BMW": ("premium", ["Serie 3", "Serie 5", "X1", "X3", "X5"]),
}

COLORS = ["Red", "Black", "White", "Silver", "Blue", "Gray", "Dark Green"]


def calculate_price(band: str, model_year: int) -> int:
    """
    Price from the brand band, depreciated ~8% per year (capped at 60%).

    Rounded to the nearest 100.
    """
    base_min, base_max = PRICE_BANDS[band]
    base_price = random.randint(base_min, base_max)

    years_old = max(0, CURRENT_YEAR - model_year)
    depreciation = min(0.08 * years_old, 0.60)
    price = base_price * (1 - depreciation) * random.uniform(0.95, 1.05)

    return int(round(price / 100) * 100)


def generate_car(brand: str, car_id: int) -> dict:
    band, models = BRANDS[brand]
    name = random.choice(models)

    # Favor newer model years
    model_year = random.choices(
        range(2016, CURRENT_YEAR + 1),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7, 7],
        k=1,
    )[0]

    return {
        "id": car_id,
        "title": f"{brand} {name}",
        "model": model_year,
        "color": random.choice(COLORS),
        "price": calculate_price(band, model_year),
        "mileage_km": random.randint(0, max(1000, (CURRENT_YEAR - model_year) * 18000)),
    }


def generate_catalog(output_dir: Path, cars_per_brand: int = CARS_PER_BRAND) -> list[Path]:
    """
    Write one JSON array per brand into ``output_dir``.

    Ids restart at 1 in every brand; they are unique within a brand only.
    """
    random.seed(RANDOM_SEED)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for brand in BRANDS:
        cars = [generate_car(brand, car_id) for car_id in range(1, cars_per_brand + 1)]
        path = output_dir / f"{catalog_file_prefix()}{brand}.json"
        path.write_text(json.dumps(cars, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        written.append(path)
    return written


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else catalog_data_dir()
    try:
        paths = generate_catalog(target)
    except OSError as e:
        print(f"Error writing sample catalog: {e}", file=sys.stderr)
        sys.exit(1)

    for path in paths:
        print(f"Wrote {path}")
