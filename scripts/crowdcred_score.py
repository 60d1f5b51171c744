#!/usr/bin/env python3
# scripts/crowdcred_score.py

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from crowdcred.core.config import load_config
from crowdcred.core.pipeline import ConfidencePipeline
from crowdcred.ingest.static import StaticVerificationSource

logger = logging.getLogger("crowdcred_score")


def load_report_payload(input_path: Path) -> Dict[str, Any]:
    """Load a raw report payload from a JSON file."""
    with open(input_path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError("Report file must contain a JSON object")
    logger.info(f"Loaded report payload from {input_path}")
    return payload


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="CrowdCred Incident Report Confidence Scorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score a report with live verification sources
  crowdcred_score.py --input report.json

  # Score without a SerpApi key using simulated sources
  crowdcred_score.py --input report.json --mock --output result.json
        """,
    )

    parser.add_argument(
        "--input", required=True, help="JSON file with the report payload"
    )
    parser.add_argument(
        "--output", help="Write the result to this JSON file (default: stdout)"
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Configuration file path (default: config/config.yaml)",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use simulated verification sources instead of SerpApi",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        sys.exit(1)

    # Load report
    input_path = Path(args.input).resolve()
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        sys.exit(1)

    try:
        payload = load_report_payload(input_path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read report payload: {e}")
        sys.exit(1)

    source = StaticVerificationSource.demo() if args.mock else None
    pipeline = ConfidencePipeline(config=config, source=source)

    result = pipeline.score_report(payload)
    status = pipeline.classify(result)
    output = {"status": status.value, **result.model_dump()}
    logger.info(f"Report scored {result.score} ({status.value})")

    rendered = json.dumps(output, indent=2, default=str)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n", encoding="utf-8")
        logger.info(f"Result written to {output_path}")
    else:
        print(rendered)


if __name__ == "__main__":
    main()
