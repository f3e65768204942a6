"""
Main entry point for generating hex word-search levels.

Usage:
    python -m src.main
    python -m src.main config.yaml
    python -m src.main config.yaml --output levels/level1.json --verbose
    python -m src.main --radius 3 --seed 42
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

import yaml

from .generator import GeneratorConfig, LevelGenerator, verify_level
from .utils import render_level


def load_config(config_path: str) -> GeneratorConfig:
    """Load generator configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GeneratorConfig(**data)


def build_config(
    config_path: Optional[str] = None,
    radius: Optional[int] = None,
    seed: Optional[int] = None,
    words: Optional[int] = None,
) -> GeneratorConfig:
    """Load the YAML config (if any) and apply command line overrides."""
    config = load_config(config_path) if config_path else GeneratorConfig()

    overrides = {}
    if radius is not None:
        overrides["radius"] = radius
    if seed is not None:
        overrides["seed"] = seed
    if words is not None:
        overrides["target_words"] = words

    if overrides:
        config = GeneratorConfig(**{**config.model_dump(), **overrides})
    return config


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a hex word-search level",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  radius: 4
  target_words: 10
  candidate_count: 20
  seed: 42
  word_pool:
    - PYTHON
    - SERVER
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--radius", "-r",
        type=int,
        help="Grid radius (overrides config)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--words", "-w",
        type=int,
        help="Target number of placed words (overrides config)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the level JSON (printed to stdout if omitted)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print placement progress and the rendered grid"
    )

    args = parser.parse_args(argv)

    try:
        config = build_config(args.config, args.radius, args.seed, args.words)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        if args.config:
            print(f"Config: {args.config}")
        print(f"Radius: {config.radius}, target words: {config.target_words}")
        print()

    generator = LevelGenerator.create(config=config)
    level = generator.generate(verbose=args.verbose)

    result = verify_level(level, radius=config.radius)
    if not result.valid:
        for err in result.errors:
            print(f"ERROR: {err.message}", file=sys.stderr)
        return 1

    payload = json.dumps(level.model_dump(), indent=2)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            f.write(payload)
    elif not args.verbose:
        print(payload)

    if args.verbose:
        print()
        print(render_level(level))
        print()
        print("=== Level Summary ===")
        print(f"Cells: {len(level.grid)}")
        print(f"Words ({len(level.words)}): {', '.join(level.words)}")
        if args.output:
            print(f"Level saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
