"""
Demo - vectorlib on two sample vectors

Prints dot products, cross products, scaled vectors and projections
to stdout. Illustrative only; nothing here is part of the library API.
"""

from __future__ import annotations
import argparse
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from vectorlib import Vector3

logger = logging.getLogger(__name__)


# ============================================================
# Configuration
# ============================================================

@dataclass
class DemoConfig:
    """Sample inputs for the demo run."""
    u: Vector3 = field(default_factory=lambda: Vector3(-8.0, -2.0, 20.0))
    v: Vector3 = field(default_factory=lambda: Vector3(-6.0, -12.0, 36.0))
    scales: List[float] = field(default_factory=lambda: [2.0, 0.5])


# ============================================================
# Report
# ============================================================

def run_demo(config: Optional[DemoConfig] = None) -> List[str]:
    """Build the report lines for one demo run."""
    config = config or DemoConfig()
    u, v = config.u, config.v
    logger.debug(f"Running demo with u={u} v={v} scales={config.scales}")

    lines = [
        f"Dot Product: {u.dot_product(v)}",
        f"Cross Product (u x v): {u.cross_product(v)}",
        f"Cross Product (v x u): {v.cross_product(u)}",
    ]
    for s in config.scales:
        lines.append(f"u Scaled to {s}x: {u * s}")
    lines.append(f"u projected onto v: {u.proj_onto(v)}")
    lines.append(f"v projected onto u: {v.proj_onto(u)}")
    return lines


# ============================================================
# Main entry point
# ============================================================

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="vectorlib demo")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    for line in run_demo():
        print(line)


if __name__ == "__main__":
    main()
