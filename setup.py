from __future__ import annotations

from setuptools import find_packages, setup

# Plain Python package; numpy is the only runtime requirement.
setup(
    name="pylut",
    version="0.1.0",
    description="Two-dimensional lookup-table interpolation for measurement compensation",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["numpy"],
    extras_require={
        "dataframe": ["pandas"],
        "test": ["pytest", "pandas"],
    },
    entry_points={"console_scripts": ["pylut=pylut.main:main"]},
)
