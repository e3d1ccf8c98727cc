from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from .config import GrowthConfig, settings
from .config_loader import config_from_mapping, load_growth_config
from .errors import ConfigurationError, HolmeKimError
from .graph_io import write_edge_list
from .growth import grow_holme_kim
from .metrics import graph_summary, summarize

logger = logging.getLogger("holmekim")

_POSITIONAL = ("net_size", "randseed", "m", "pt", "seed_size", "seed_type", "k_ave")
_CASTS = (int, int, int, float, int, str, float)


def _config_from_positional(values: list[str]) -> GrowthConfig:
    if len(values) < 6 or len(values) > 7:
        raise ConfigurationError(
            "Please specify arguments: N, randseed, m, pt, seedSize, seedType, "
            "optionally k_ave for Erdos-Renyi seed"
        )
    params = {}
    for name, cast, raw in zip(_POSITIONAL, _CASTS, values):
        try:
            params[name] = cast(raw)
        except ValueError as e:
            raise ConfigurationError(f"bad value for {name}: {raw!r}") from e
    return config_from_mapping(params)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Generate a Holme-Kim network and report its statistics."""
    p = argparse.ArgumentParser(
        prog="holmekim",
        description="Holme-Kim network generator (preferential attachment + triangle formation).",
    )
    p.add_argument(
        "params",
        nargs="*",
        metavar="PARAM",
        help="N randseed m pt seedSize seedType [k_ave]; seedType is one of random/clique/ring/chain",
    )
    p.add_argument("--config", type=str, default=None, help="YAML file with run parameters")
    p.add_argument("--edges", type=str, default=None, help="Write the edge list here ('-' for stdout)")
    p.add_argument("--out", type=str, default="-", help="Output path for summary JSON (default: stdout)")
    p.add_argument("--check-invariants", action="store_true", help="Validate bookkeeping after every step")
    p.add_argument("--max-retries", type=int, default=settings.MAX_PICK_RETRIES)
    p.add_argument("--log-level", type=str, default="INFO")

    args = p.parse_args(argv)
    _setup_logging(args.log_level)

    try:
        if args.config:
            if args.params:
                raise ConfigurationError("give either --config or positional parameters, not both")
            cfg = load_growth_config(args.config)
        else:
            cfg = _config_from_positional(args.params)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 2

    try:
        result = grow_holme_kim(
            cfg,
            check_invariants=bool(args.check_invariants),
            max_retries=int(args.max_retries),
        )
    except ConfigurationError as e:
        logger.error("%s", e)
        return 2
    except HolmeKimError as e:
        logger.error("generation failed: %s", e)
        return 1

    logger.info("network:\n%s", graph_summary(result.graph))

    if args.edges:
        write_edge_list(result.graph, args.edges, edges=result.edges)

    payload = {
        "summary": summarize(result),
        "settings": {**asdict(cfg), "seed_type": cfg.seed_type.value},
    }
    txt = json.dumps(payload, ensure_ascii=False, indent=2, default=float)
    if args.out == "-":
        if args.edges == "-":
            # stdout is taken by the edge list
            logger.info("summary:\n%s", txt)
        else:
            print(txt)
    else:
        Path(args.out).write_text(txt, encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
