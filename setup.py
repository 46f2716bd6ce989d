
from setuptools import find_namespace_packages, setup

setup(
    name="describer",
    version="0.1",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["common*", "config*", "description*", "excerpt*", "models*"]),
    python_requires=">=3.11",
    install_requires=[
        "beautifulsoup4>=4.12.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "ruff>=0.1.9",
        ],
    },
)
