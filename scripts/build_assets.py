import argparse
import logging
import shutil
from pathlib import Path

from cdk import constants

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def build_service(output_dir: Path) -> None:
    """Copy the service package into the Lambda code folder."""
    if output_dir.exists():
        shutil.rmtree(output_dir)
    shutil.copytree(
        PROJECT_ROOT / "service",
        output_dir / "service",
        ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
    )
    logger.info("Staged service code in %s", output_dir)


def main():
    parser = argparse.ArgumentParser(description="Stage Lambda service code for cdk deploy")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=constants.SERVICE_BUILD_FOLDER,
        help="Folder the Lambda function code asset is read from",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    build_service(PROJECT_ROOT / args.output_dir)


if __name__ == "__main__":
    main()
