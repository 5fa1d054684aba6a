from setuptools import setup, find_namespace_packages

setup(
    name="progbasics",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(
        where="src",
        include=["progbasics", "progbasics.*"],
    ),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst-parser", "furo"],
    },
    entry_points={
        "console_scripts": [
            "progbasics-demo=progbasics.cli:main",
            "progbasics-run=progbasics.experiments.run_from_config:main",
        ],
    },
)
