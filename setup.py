from setuptools import setup, find_packages

setup(
    name="oairest",
    version="0.1.0",
    description="Asynchronous typed client for the OpenAI REST API",
    author="oairest contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "click",
        "httpx>=0.24",
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "oairest=oairest.main:main",
        ],
    },
    python_requires=">=3.8",
)
