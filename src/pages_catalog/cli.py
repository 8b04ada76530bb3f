"""產生 projects.json 的命令列入口。"""

import argparse
import logging
import sys

from pages_catalog.config import settings
from pages_catalog.generator.manifest import write_manifest
from pages_catalog.generator.pipeline import generate
from pages_catalog.github.client import GitHubAPIError, GitHubClient

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pages-catalog-generate",
        description="Build a JSON manifest of a GitHub account's Pages sites.",
    )
    parser.add_argument("--user", help="account to scan (default: $GITHUB_USER)")
    parser.add_argument("--output", help="manifest path (default: $OUTPUT_PATH)")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    owner = args.user or settings.github_user
    token = settings.github_token
    # 必要憑證缺少時，在任何網路呼叫前結束
    if not owner:
        logger.error("GITHUB_USER is not set")
        return 1
    if not token:
        logger.error("GITHUB_TOKEN is not set")
        return 1

    output = args.output or settings.output_path

    with GitHubClient(token) as client:
        try:
            report = generate(client, owner)
        except GitHubAPIError as e:
            logger.error("Failed to list repositories for %s: %s", owner, e.message)
            return 1

    path = write_manifest(report.records, output)
    logger.info("Generated %d project(s) into %s", len(report.records), path.resolve())
    if report.failed:
        logger.warning(
            "%d repository(ies) failed: %s",
            len(report.failed), ", ".join(f.repo for f in report.failed),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
