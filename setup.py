from setuptools import setup, find_packages

setup(
    name="pic-client",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"pic_client": ["bin/*"]},
    install_requires=[
        "aiohttp>=3.8.0",
        "python-dotenv>=1.0.0",
        "prometheus_client>=0.17.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.8",
)
