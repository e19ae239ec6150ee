"""
Command line assessment.

Runs the stages in order with selections given as flags and prints the
result. Stages after the first terminal result are not evaluated, so
e.g. --exclude has no effect once Q2 is already reached.

    meadow-assess --q2 q2-salvia-pratensis q2-briza-media \\
                  --potential pot-trifolium-pratense \\
                  --site neighbors --measure meas-hay --exclude wet
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from meadow_toolkit import __version__
from meadow_toolkit.catalog import CatalogLoadError, load_catalog
from meadow_toolkit.core.models import (
    ExclusionCriteria,
    ManagementMeasures,
    SiteFactors,
    Stage,
)
from meadow_toolkit.engine import AssessmentController, AssessmentError, describe_result

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meadow-assess",
        description="Q2 meadow self-assessment (Qualitätsstufe II / Aufwertungspotenzial)",
    )
    parser.add_argument("--q2", nargs="*", default=[], metavar="ID",
                        help="Selected Q2 indicator plant ids")
    parser.add_argument("--potential", nargs="*", default=[], metavar="ID",
                        help="Selected potential indicator plant ids")
    parser.add_argument("--site", nargs="*", default=[], choices=SiteFactors.NAMES,
                        help="Site factors that apply")
    parser.add_argument("--measure", nargs="*", default=[], metavar="ID",
                        help="Committed measure ids (meas-hay, meas-cut-time, ...)")
    parser.add_argument("--exclude", nargs="*", default=[],
                        choices=("shade", "wet", "yield", "weeds"),
                        help="Exclusion criteria that apply")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory with plants.json and measures.json")
    parser.add_argument("--list-plants", action="store_true",
                        help="List catalog plant ids and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log stage transitions")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        catalog = load_catalog(args.data_dir)
    except CatalogLoadError as e:
        print(e.user_message, file=sys.stderr)
        return EXIT_ERROR

    if args.list_plants:
        for plant in catalog.plants:
            print(f"{plant.kind.value:10} {plant.id:32} {plant.name} ({plant.botanical_name})")
        return EXIT_OK

    controller = AssessmentController(catalog)
    try:
        # Listed ids are selections; a repeat must not toggle the plant back off
        for plant_id in dict.fromkeys(args.q2):
            controller.toggle_quality_plant(plant_id)
        transition = controller.evaluate_quality_level()

        if transition.next_stage is Stage.POTENTIAL_FLORA:
            for plant_id in dict.fromkeys(args.potential):
                controller.toggle_potential_plant(plant_id)
            controller.confirm_potential_flora()
            transition = controller.evaluate_management(
                SiteFactors.from_names(args.site),
                ManagementMeasures.from_ids(args.measure),
            )

        if transition.next_stage is Stage.SEEDING:
            transition = controller.evaluate_seeding(ExclusionCriteria.from_names(args.exclude))
    except (AssessmentError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(describe_result(transition.result).to_text(), end="")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
