#!/usr/bin/env python3
"""Batch render the topology fixtures and shipped examples to SVG.

Every file is rendered in each theme and placement variant. Outputs go to
/tmp/roadmap_layout_renders/.

Usage:
    python scripts/render_examples.py [--dynamic-width]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from roadmap_layout.layout import LayoutConfig, layout_roadmap, route_edges  # noqa: E402
from roadmap_layout.layout.config import VARIANTS  # noqa: E402
from roadmap_layout.parser import load_roadmap_file  # noqa: E402
from roadmap_layout.parser.checks import Severity, check_roadmap  # noqa: E402
from roadmap_layout.render import render_svg  # noqa: E402
from roadmap_layout.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/roadmap_layout_renders")
TOPOLOGIES_DIR = project_root / "tests" / "fixtures" / "topologies"
EXAMPLES_DIR = project_root / "examples"

# Files to render
FIXTURE_FILES = sorted(TOPOLOGIES_DIR.glob("*.json"))
EXTRA_FILES = sorted(EXAMPLES_DIR.glob("*.json"))


def render_file(
    json_path: Path, output_dir: Path, *, dynamic_width: bool = False
) -> tuple[str, list[str]]:
    """Load, lay out, and render a .json file in every theme and variant.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        roadmap = load_roadmap_file(json_path)
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    for issue in check_roadmap(roadmap):
        if issue.severity == Severity.WARNING:
            issues.append(f"warning: {issue.message}")
        else:
            issues.append(f"data: {issue.message}")

    for variant in VARIANTS:
        config = LayoutConfig(variant=variant, dynamic_width=dynamic_width)
        try:
            layout = layout_roadmap(roadmap, config)
        except ValueError as e:
            return name, issues + [f"LAYOUT ERROR ({variant}): {e}"]

        routes = route_edges(layout, roadmap.topics, roadmap.dependencies, config)
        for theme_name, theme in THEMES.items():
            svg_str = render_svg(roadmap, layout, routes, theme, config)
            svg_path = output_dir / f"{name}_{variant}_{theme_name}.svg"
            svg_path.write_text(svg_str)

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render roadmap definitions")
    parser.add_argument(
        "--dynamic-width", action="store_true", help="Size boxes from title length"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = FIXTURE_FILES + EXTRA_FILES
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    any_errors = False

    for json_path in all_files:
        name, issues = render_file(
            json_path, OUTPUT_DIR, dynamic_width=args.dynamic_width
        )
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
