
import argparse
import json
import logging
import time
from pathlib import Path

from .catalog import random_points, rotated_copy
from .config import OrientationConfig
from .errors import TriangleOrientationError
from .pipeline import estimate_pipeline
from .points_io import read_points

logger = logging.getLogger("triangle_orientation")


def build_parser():
    ap = argparse.ArgumentParser(description="Rotational offset between two 2D point sets via triangle matching")
    ap.add_argument("--first", type=Path, help="space-delimited points file (x y per line)")
    ap.add_argument("--second", type=Path, help="space-delimited points file (x y per line)")
    ap.add_argument("--demo", action="store_true", help="generate a random field and a rotated copy instead of reading files")
    ap.add_argument("--points", type=int, default=12, help="demo: number of points")
    ap.add_argument("--rotation", type=float, default=25.0, help="demo: rotation of the first set (deg)")
    ap.add_argument("--noise", type=float, default=0.0, help="demo: gaussian jitter added to the first set")
    ap.add_argument("--shuffle", action="store_true", help="demo: shuffle the first set")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--config", type=Path, help="JSON file with OrientationConfig fields")
    ap.add_argument("--epsilon", type=float)
    ap.add_argument("--angles-threshold", type=float)
    ap.add_argument("--retries", type=int)
    ap.add_argument("--buckets", type=int)
    ap.add_argument("--out", type=Path, default=Path("outputs"))
    ap.add_argument("--no-plots", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap

def load_config(args):
    config = OrientationConfig.from_json(args.config) if args.config else OrientationConfig()
    return config.replace(epsilon=args.epsilon, angles_threshold=args.angles_threshold,
                          num_epsilon_insert_retries=args.retries, num_buckets=args.buckets)

def load_points(args, ap):
    if args.demo:
        second = random_points(N=args.points, seed=args.seed)
        first = rotated_copy(second, args.rotation, noise=args.noise, shuffle=args.shuffle, seed=args.seed+1)
        return first, second
    if args.first is None or args.second is None:
        ap.error("--first and --second are required unless --demo is given")
    return read_points(args.first), read_points(args.second)

def run(args, ap):
    t0 = time.perf_counter()
    config = load_config(args)
    logger.debug("Gonna load the points")
    points1, points2 = load_points(args, ap)
    logger.debug("Points loaded")

    res = estimate_pipeline(points1, points2, config)
    pairs = res.pairs
    elapsed_ms = 1000.0*(time.perf_counter() - t0)

    print(f"Most probable orientation: {res.orientation:.6f}")
    print(f"Time elapsed: {elapsed_ms:.0f}")

    args.out.mkdir(parents=True, exist_ok=True)
    mets = {
        "orientation_deg": float(res.orientation),
        "bucket_id": res.bucket_id,
        "bucket_width": res.bucket_width,
        "support": res.support,
        "num_pairs": res.num_pairs,
        "num_points": [len(points1), len(points2)],
        "dropped_pairs": pairs.num_dropped,
        "elapsed_ms": elapsed_ms,
        "config": config.to_dict(),
    }
    if args.demo:
        mets["true_rotation_deg"] = args.rotation
    (args.out/"metrics.json").write_text(json.dumps(mets, indent=2))

    if not args.no_plots:
        from .plots import orientation_hist_plot, point_sets_plot
        orientation_hist_plot(pairs, res, args.out/"orientation_hist.png")
        point_sets_plot(points1, points2, res.orientation, args.out/"point_sets.png")
    return res

def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        run(args, ap)
    except TriangleOrientationError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
