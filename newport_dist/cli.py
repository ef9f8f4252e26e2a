"""Command-line entry point for the dist pipeline."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import BuildContext, load_config
from .exceptions import PipelineError
from .steps import run_dist


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="newport-dist", description="Assemble the design system distribution.")
    parser.add_argument("--project-root", default=".")
    parser.add_argument("--config", help="YAML config file (defaults to dist.config.yml when present).")
    parser.add_argument("--output-dir", help="Override the output directory.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--json", action="store_true", help="Print the run summary as JSON.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    project_root = Path(args.project_root).resolve()
    try:
        config = load_config(project_root, Path(args.config) if args.config else None)
        if args.output_dir:
            config = config.model_copy(update={"output_dir": args.output_dir})
        context = BuildContext.from_config(config, project_root)
        result = run_dist(context)
    except PipelineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = {"version": context.version, "output_dir": str(context.roots.dist), **result.to_dict()}
        print(json.dumps(payload, indent=2))
    else:
        print(f"Built {context.display_name} {context.version} in {context.roots.dist}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
