"""Campaign breakdown dashboard entrypoint."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from campaign_breakdowns.application.report_service import run_dashboard_pipeline
from campaign_breakdowns.config import LOG_LEVEL


def main() -> None:
    parser = argparse.ArgumentParser(description="Aggregate campaign breakdowns into dashboard views.")
    parser.add_argument("--input", type=Path, default=None, help="Marketing payload JSON (defaults to DASHBOARD_INPUT_PATH).")
    parser.add_argument("--output-dir", type=Path, default=None, help="Output directory (defaults to DASHBOARD_OUTPUT_DIR).")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_dashboard_pipeline(input_path=args.input, output_dir=args.output_dir)


if __name__ == "__main__":
    main()
