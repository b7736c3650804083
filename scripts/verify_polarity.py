"""Check that each Cayley-Klein polarity is an involution on random integer points and lines."""
import argparse
import logging

import torch

from projgeom.pg import PgPoint, PgLine, approx_equal, is_degenerate
from projgeom.ck import PLANES, perp, altitude, is_perpendicular
from projgeom.utils import load_config, set_config

logger = logging.getLogger("verify_polarity")

# Perspective and Euclidean polarities collapse onto the line at infinity
INVOLUTIVE = {"elliptic", "hyperbolic", "myck"}


def verify_plane(name, samples, generator):
    plane = PLANES[name]
    coords = torch.randint(-20, 21, (samples, 3), generator=generator, dtype=torch.int64)
    # Drop zero triples; they name no point or line
    coords = coords[(coords != 0).any(dim=-1)]

    points = PgPoint(coords)
    lines = PgLine(coords.flip(-1))
    failures = 0

    if name in INVOLUTIVE:
        bad = ~(perp(plane, perp(plane, points)) == points)
        bad |= ~(perp(plane, perp(plane, lines)) == lines)
        failures += int(bad.sum())

    # Altitudes are perpendicular to their base in every plane
    t = altitude(plane, points, lines)
    ok = is_perpendicular(plane, t, lines) | is_degenerate(t)
    failures += int((~ok).sum())

    # Exactness check on the float path as well
    fpoints = PgPoint(coords.to(torch.float64))
    if name in INVOLUTIVE:
        close = approx_equal(perp(plane, perp(plane, fpoints)), fpoints, atol=1e-6)
        failures += int((~close).sum())

    logger.info(f"{name}: {coords.shape[0]} samples, {failures} failures")
    return failures


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--plane", choices=sorted(PLANES), action="append",
                        help="plane to check (repeatable, default: all)")
    parser.add_argument("--samples", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.config:
        set_config(load_config(args.config))

    generator = torch.Generator().manual_seed(args.seed)
    total = 0
    for name in args.plane or sorted(PLANES):
        total += verify_plane(name, args.samples, generator)

    print(f"Found {total} failures")
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
