from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from universe import UniverseConfig, build_universe, load_config


def run(cfg: UniverseConfig) -> None:
    u = build_universe(cfg)
    print(f"generation 0: {u.population()} alive")
    print(u.render())
    for gen in range(1, cfg.generations + 1):
        u.tick()
        if gen % cfg.print_every == 0 or gen == cfg.generations:
            print(f"generation {gen}: {u.population()} alive")
            print(u.render())


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, default="", help="YAML config file")
    # Optional overrides
    ap.add_argument("--width", type=int)
    ap.add_argument("--height", type=int)
    ap.add_argument("--pattern", type=str)
    ap.add_argument("--seed", type=int)
    ap.add_argument("--generations", type=int)
    ap.add_argument("--log-level", type=str, default="WARNING")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cfg = load_config(args.config) if args.config else UniverseConfig()
    overrides = {
        k: getattr(args, k)
        for k in ("width", "height", "pattern", "seed", "generations")
        if getattr(args, k) is not None
    }
    if overrides:
        fields = {k: getattr(cfg, k) for k in cfg.__dataclass_fields__}
        fields.update(overrides)
        cfg = UniverseConfig.from_dict(fields)
    run(cfg)


if __name__ == "__main__":
    main()
