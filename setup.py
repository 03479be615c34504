from setuptools import setup, find_packages

setup(
    name="intel-reports",
    version="0.1.0",
    description="Intelligence report lifecycle engine: catalog, configuration, generation and rendering",
    author="SpaceNexus Team",
    author_email="info@spacenexus.us",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["api"],
    install_requires=[
        line.strip() for line in open("requirements.txt").readlines()
        if line.strip() and not line.startswith("#")
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "intel-reports-api=api:main",
        ],
    },
    python_requires=">=3.11",
)
