from setuptools import find_packages, setup

setup(
    name="recent-work",
    version="0.1.0",
    description="Recent Work - a folder of symlinks to recently modified files",
    packages=find_packages(include=["recent_work", "recent_work.*"]),
    python_requires=">=3.10",
    install_requires=[
        "watchdog",  # File system monitoring
        "pydantic>=2",  # Config and state record validation
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output for CLI
        "pygments",  # Syntax highlighting of CLI output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "recent-work=recent_work.cli:main",
        ],
    },
)
