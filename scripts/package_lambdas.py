#!/usr/bin/env python3
"""
Build script for the demo Lambda functions.

Every directory under src/ holding a lambda_function.py is zipped together
with the shared service package into build/<function>.zip.
"""
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path
from typing import List, Optional

SHARED_PACKAGE = "service"
ENTRY_MODULE = "lambda_function.py"
IGNORED = shutil.ignore_patterns("__pycache__", "*.pyc", "test_*.py")


def find_functions(src_dir: Path) -> List[Path]:
    """Function directories in src_dir, sorted by name."""
    return sorted(
        d for d in src_dir.iterdir()
        if d.is_dir() and (d / ENTRY_MODULE).exists()
    )


def build_function(function_dir: Path, src_dir: Path, build_dir: Path) -> Path:
    """Package one function and return the path of its zip archive."""
    function_name = function_dir.name
    zip_path = build_dir / f"{function_name}.zip"

    print(f"Building {function_name}...")

    # Create temporary directory for packaging
    temp_dir = build_dir / f"temp_{function_name}"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)

    # Copy function files and the shared service package
    shutil.copytree(function_dir, temp_dir, ignore=IGNORED)
    shared_dir = src_dir / SHARED_PACKAGE
    if shared_dir.exists():
        shutil.copytree(shared_dir, temp_dir / SHARED_PACKAGE, ignore=IGNORED)

    # Install dependencies if requirements.txt exists
    requirements_file = function_dir / "requirements.txt"
    if requirements_file.exists():
        print(f"Installing dependencies for {function_name}...")
        subprocess.run([
            sys.executable, "-m", "pip", "install",
            "-r", str(requirements_file),
            "-t", str(temp_dir),
        ], check=True)

    print(f"Creating {function_name}.zip...")
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(temp_dir):
            for file in files:
                file_path = Path(root) / file
                arcname = file_path.relative_to(temp_dir)
                zipf.write(file_path, arcname)

    shutil.rmtree(temp_dir)

    print(f"{function_name}.zip created ({zip_path.stat().st_size} bytes)")
    return zip_path


def build(project_root: Optional[Path] = None) -> List[Path]:
    """Package every function under project_root/src into project_root/build."""
    project_root = project_root or Path(__file__).parent.parent
    src_dir = project_root / "src"
    build_dir = project_root / "build"
    build_dir.mkdir(exist_ok=True)

    functions = find_functions(src_dir)
    print(f"Building Lambda functions: {[f.name for f in functions]}")

    archives = [build_function(function_dir, src_dir, build_dir) for function_dir in functions]

    print("Build complete!")
    return archives


def main():
    """Main build function"""
    build()


if __name__ == "__main__":
    main()
