"""Setup script for echo-onboarding project."""

from setuptools import find_namespace_packages, setup

setup(
    name="echo-onboarding",
    version="0.1.0",
    description="Echo Growth client onboarding Discord bot",
    packages=find_namespace_packages(include=["cogs", "cogs.*", "core", "core.*", "utils", "utils.*"]),
    py_modules=["main"],
    python_requires=">=3.10",
    package_dir={"": "."},
    include_package_data=True,
    install_requires=[
        "discord.py>=2.3",
        "aiohttp>=3.9",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
)
