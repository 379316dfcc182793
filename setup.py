from setuptools import find_packages, setup

setup(
    name="urlmapper",
    version="0.1.0",
    description="Rewrite local upload URLs to remote object-storage URLs at output time",
    packages=find_packages(include=["urlmapper", "urlmapper.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config, records and output schemas
        "pymongo",  # MongoDB options and meta store
        "mongomock",  # In-memory MongoDB backend
        "typer<0.26",  # CLI (later releases vendor click, hiding the context from click.get_current_context)
        "click>=8.2",  # CLI context and usage errors
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output and settings import
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
            "urlmap=urlmapper.cli:main",
        ],
    },
)
