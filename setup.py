from setuptools import setup, find_packages

setup(
    name="welcome-art",
    version="0.1.0",
    description="ASCII-art login banners with layered configuration & template management",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer<0.26",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "welcome-art=welcome_art.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
