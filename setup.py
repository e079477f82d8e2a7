"""Setup script for config_commons."""

from pathlib import Path

from setuptools import find_packages, setup

README = Path(__file__).parent / "README.md"


if __name__ == "__main__":
    setup(
        name="config-commons",
        version="0.1.0",
        description="Typed configuration value conversion with canonical string rendering",
        long_description=README.read_text(encoding="utf-8") if README.exists() else "",
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        python_requires=">=3.10",
        install_requires=[
            "colorify",
            "numpy",
            "pydantic>=2",
            "python-dotenv",
        ],
        extras_require={
            "test": [
                "pytest",
            ],
        },
    )
