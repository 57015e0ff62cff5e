from setuptools import setup, find_packages

setup(
    name="servicecontainer",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    description="Build-time service container with per-backend service overrides.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
