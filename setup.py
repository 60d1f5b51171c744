# setup.py
"""
CrowdCred - confidence scoring for crowdsourced incident reports.
"""

import os

from setuptools import find_packages, setup

this_directory = os.path.abspath(os.path.dirname(__file__))


def read_requirements(filename):
    """Read a requirements file, skipping comments and blank lines."""
    path = os.path.join(this_directory, filename)
    if not os.path.exists(path):
        return []
    with open(path, encoding="utf-8") as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.strip().startswith("#")
        ]


with open(os.path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="crowdcred",
    version="0.1.0",
    description="Real-time confidence scoring for crowdsourced incident reports",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    # The CLI lives in scripts/, next to the src/ package
    packages=find_packages(where="src") + ["scripts"],
    package_dir={"": "src", "scripts": "scripts"},
    python_requires=">=3.10",
    install_requires=read_requirements("requirements.txt"),
    extras_require={"dev": read_requirements("requirements-dev.txt")},
    entry_points={
        "console_scripts": [
            "crowdcred-score=scripts.crowdcred_score:main",
        ],
    },
    zip_safe=False,
)
