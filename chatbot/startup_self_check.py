from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StartupSelfCheckResult:
    public_dir: str
    public_dir_present: bool
    index_present: bool
    issues: list[str]


def run_startup_self_check(*, public_dir: Path, logger: logging.Logger) -> StartupSelfCheckResult:
    result = analyze_public_dir(public_dir)

    if not result.public_dir_present:
        logger.warning("startup_self_check anomaly=public_dir_missing path=%s", result.public_dir)
    elif not result.index_present:
        logger.warning("startup_self_check anomaly=index_html_missing path=%s", result.public_dir)
    if not result.issues:
        logger.info("startup_self_check ok public_dir=%s", result.public_dir)
    return result


def analyze_public_dir(public_dir: Path) -> StartupSelfCheckResult:
    issues: list[str] = []
    public_dir_present = public_dir.is_dir()
    index_present = public_dir_present and (public_dir / "index.html").is_file()

    if not public_dir_present:
        issues.append("public_dir_missing")
    elif not index_present:
        issues.append("index_html_missing")

    return StartupSelfCheckResult(
        public_dir=str(public_dir),
        public_dir_present=public_dir_present,
        index_present=index_present,
        issues=issues,
    )
