from setuptools import setup, find_packages

setup(
    name="vsop87",
    version="0.1.0",
    description="Heliocentric elliptic elements of the planets from the VSOP87 theory",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.25.0",
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vsop87=vsop87.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
