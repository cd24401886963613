#!/usr/bin/env python3
"""
Package the contact form Lambda function as a deployment zip.

The archive holds the function entry point, the shared service package and
the function's pinned requirements.

Usage:
    python scripts/build.py [--output-dir build] [--skip-deps]
"""
import argparse
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

FUNCTION_NAME = "contact_form"
PROJECT_ROOT = Path(__file__).parent.parent
SRC_DIR = PROJECT_ROOT / "src"
EXCLUDED = shutil.ignore_patterns("__pycache__", "*.pyc", "test_*.py")


def stage_sources(staging_dir: Path) -> None:
    """Lay out the entry point with the service package beside it, as the runtime imports it"""
    shutil.copytree(SRC_DIR / FUNCTION_NAME, staging_dir, ignore=EXCLUDED, dirs_exist_ok=True)
    shutil.copytree(SRC_DIR / "service", staging_dir / "service", ignore=EXCLUDED)


def install_requirements(staging_dir: Path) -> None:
    requirements_file = SRC_DIR / FUNCTION_NAME / "requirements.txt"
    if not requirements_file.exists():
        return
    print(f"Installing {requirements_file.relative_to(PROJECT_ROOT)}...")
    subprocess.run([
        sys.executable, "-m", "pip", "install",
        "--quiet",
        "-r", str(requirements_file),
        "-t", str(staging_dir),
    ], check=True)


def write_archive(staging_dir: Path, zip_path: Path) -> None:
    with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as archive:
        for root, _, files in os.walk(staging_dir):
            for name in sorted(files):
                file_path = Path(root) / name
                archive.write(file_path, file_path.relative_to(staging_dir))


def main():
    """Build the deployment package"""
    parser = argparse.ArgumentParser(description="Package the contact form Lambda function")
    parser.add_argument("--output-dir", default=str(PROJECT_ROOT / "build"), help="Directory for the zip")
    parser.add_argument("--skip-deps", action="store_true", help="Leave out third-party requirements")
    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    staging_dir = output_dir / f"temp_{FUNCTION_NAME}"
    zip_path = output_dir / f"{FUNCTION_NAME}.zip"

    if staging_dir.exists():
        shutil.rmtree(staging_dir)

    print(f"Building {FUNCTION_NAME}...")
    stage_sources(staging_dir)
    if not args.skip_deps:
        install_requirements(staging_dir)

    write_archive(staging_dir, zip_path)
    shutil.rmtree(staging_dir)

    print(f"{zip_path.name} created ({zip_path.stat().st_size} bytes)")


if __name__ == "__main__":
    main()
