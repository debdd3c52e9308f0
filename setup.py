from setuptools import find_packages, setup

setup(
    name="inlineref",
    version="0.1.0",
    description="Inline reference resolution between editor markup and [REF:id] tokens",
    packages=find_packages(include=["inlineref", "inlineref.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config and record validation
        "pymongo",  # MongoDB
        "mongomock",  # In-memory MongoDB for tests and local use
        "beautifulsoup4",  # Markup parsing
        "typer",  # CLI
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "irefc=inlineref.cli:main",
        ],
    },
)
