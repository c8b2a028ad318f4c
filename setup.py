from setuptools import find_packages, setup

setup(
    name="vimania",
    version="2.0.0",
    description="Vimania - resolve and open Markdown links under the cursor",
    author="vimania contributors",
    packages=find_packages(include=["vimania", "vimania.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # Command line interface (0.26+ vendors click; the CLI uses click directly)
        "click",  # Used directly by the CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "requests",  # URL title fetching
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "vimania=vimania.cli:main",
        ],
    },
)
