#!/usr/bin/env python3

from pathlib import Path

from setuptools import find_packages, setup


def get_version():
    """Read version from adminkit/__init__.py"""
    with open("adminkit/__init__.py") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"


def _collect_package_files(*directories: str):
    """Collect package data files relative to the adminkit package."""
    collected = []
    package_root = Path("adminkit")
    for directory in directories:
        root = Path(directory)
        if not root.exists():
            continue
        for path in root.rglob("*"):
            if path.is_file():
                collected.append(str(path.relative_to(package_root)))
    return collected


base_deps = [
    "fastapi[standard]>=0.115.0",
    "jinja2>=3.1.2",
    "markupsafe>=2.1.0",
    "colorama>=0.4.6",
    "uvicorn>=0.30.0",
]

extras_require = {
    "test": [
        "pytest>=8.0.0",
        "httpx>=0.27.0",
    ],
    "dev": [
        "black>=23.0.0",
        "isort>=5.12.0",
        "flake8>=6.0.0",
    ],
}

try:
    long_description = Path("README.md").read_text(encoding="utf-8")
except OSError:
    long_description = "Server-rendered admin form widgets."

setup(
    name="adminkit",
    version=get_version(),
    description="Server-rendered admin form widgets with dialog table selection.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "adminkit": _collect_package_files("adminkit/templates"),
    },
    python_requires=">=3.9",
    install_requires=base_deps,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "adminkit-server=adminkit.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Framework :: FastAPI",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    ],
    keywords="admin forms widgets jinja2 fastapi htmx",
)
