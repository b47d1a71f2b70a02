from setuptools import setup, find_packages

setup(
    name="cbb-matchup-predictor",
    version="0.1.0",
    description="Closed-form win probability model for college basketball matchups",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.22.4",
        "pandas>=1.5.3",
        "scipy>=1.10.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "cbb-predict=cbb_predictor.main:main",
        ],
    },
)
