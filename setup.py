# setup.py
from setuptools import setup, find_packages

setup(
    name="health_probe",
    version="0.1.0",
    description="Headless Selenium readiness probe for HTTP services",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"health_probe": ["default.yaml"]},
    install_requires=[
        "selenium>=4.10",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "health-probe=health_probe.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
