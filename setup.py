from setuptools import find_packages, setup


setup(
    name="elevenlabs-speech",
    version="0.1.0",
    description="Typed async client for the ElevenLabs text-to-speech HTTP API.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "httpx>=0.27",
        "structlog>=24.1",
        "rich>=13.7",
    ],
    extras_require={
        "dev": ["pytest>=8.0", "pytest-asyncio>=0.23", "ruff>=0.6", "mypy>=1.8"],
    },
)
