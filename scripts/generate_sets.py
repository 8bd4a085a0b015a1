#!/usr/bin/env python3
"""Generate sets or a team from a JSON file of candidate pools.

The candidates file is a JSON list of objects with the `CandidateInput`
fields (species, moves, abilities, items, types, role, level). An optional
registry file holds `{"species": {...}, "moves": {...}}` reference data.

Usage:
    python scripts/generate_sets.py candidates.json
    python scripts/generate_sets.py candidates.json --team --registry dex.json
    python scripts/generate_sets.py candidates.json -o seed=7 -o generation.generation=7
    python scripts/generate_sets.py candidates.json --show-config
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List

import numpy as np
from loguru import logger
from pydantic import ValidationError

from randset.builder.set_generator import SetGenerator
from randset.builder.team import TeamBuilder
from randset.core.exceptions import RandSetError
from randset.core.hydra_utils import load_config, print_config
from randset.core.logging_utils import setup_logging
from randset.data.registry import StaticRegistry
from randset.data.schemas import CandidateInput


def read_candidates(path: Path, default_level: int) -> List[CandidateInput]:
    """Parse candidate records, skipping invalid ones."""
    with open(path) as f:
        records = json.load(f)

    candidates = []
    for i, record in enumerate(records):
        record.setdefault("level", default_level)
        try:
            candidates.append(CandidateInput.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping candidate #{i}: {e.error_count()} validation errors")
    return candidates


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate competitive sets from candidate pools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "candidates",
        type=Path,
        help="JSON list of candidate pools"
    )
    parser.add_argument(
        "--registry",
        type=Path,
        default=None,
        help="JSON species/move reference data"
    )
    parser.add_argument(
        "--team",
        action="store_true",
        help="Assemble a team instead of one set per candidate"
    )
    parser.add_argument(
        "-o", "--override",
        action="append",
        default=[],
        help="Hydra-style config override (repeatable)"
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved config before generating"
    )

    args = parser.parse_args()

    try:
        cfg = load_config(overrides=args.override)
    except RandSetError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(cfg.logging, debug=cfg.debug)
    if args.show_config:
        print_config(cfg)

    registry = None
    if args.registry:
        with open(args.registry) as f:
            registry = StaticRegistry.from_dict(json.load(f))
        logger.info(f"Loaded registry with {len(registry)} species")

    candidates = read_candidates(args.candidates, cfg.generation.default_level)
    if not candidates:
        logger.error(f"No valid candidates in {args.candidates}")
        sys.exit(1)

    rng = np.random.default_rng(cfg.seed)
    generator = SetGenerator(cfg, species_registry=registry, move_registry=registry)

    if args.team:
        team = TeamBuilder(generator).build(candidates, rng)
        print(team.to_showdown_paste())
    else:
        for candidate in candidates:
            print(generator.generate_set(candidate, rng).to_showdown_paste())
            print()


if __name__ == "__main__":
    main()
