"""
Setup script for mathquest-engine.

MathQuest turns a free-text topic tag and a learner's mastery profile into
a freshly generated, bilingual (English/Chinese) math question at the right
difficulty, and grades free-text answers against it.

The 'mathquest' command exposes question generation, answer checking and an
interactive practice loop from the terminal.
"""

from setuptools import find_packages, setup

setup(
    name="mathquest-engine",
    version="0.1.0",
    description="Adaptive bilingual math question engine with answer validation and leveling",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mathquest", "mathquest.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mathquest=mathquest.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="math education adaptive-learning question-generation cli",
)
