"""
Setup script for the breakout-rules package.

Installs the rules engine from the src/ layout. The internal modules
(_core, _shared) ship as regular Python source alongside the public API
(config.py, session.py, types.py, errors.py, cli.py).
"""

from setuptools import setup, find_packages

setup(
    name="breakout-rules",
    version="1.0.0",
    description="Breakout Rules Engine - lives, score, combo bonus and block state for a brick-breaker",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "breakout-rules=breakout_rules.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Games/Entertainment :: Arcade",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
