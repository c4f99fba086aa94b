"""
pip-installable setup for the nl-classifier-client SDK.

Install (editable, from the repository root)::

    pip install -e .

Run the test suite::

    pip install -e ".[test]"
    pytest tests/

This installs a single package:
  - nl_classifier   : blocking and asyncio clients for the classifier service
"""

from setuptools import find_packages, setup

setup(
    name="nl-classifier-client",
    version="1.0.0",
    description="Python client for a remote natural language classifier service",
    long_description=(
        "A Python SDK for a hosted text classification service: list, create, "
        "inspect and delete classifiers, and classify text against them. "
        "Responses are decoded into typed, immutable records and service error "
        "envelopes are mapped to Python exceptions."
    ),
    python_requires=">=3.10",
    packages=find_packages(include=["nl_classifier", "nl_classifier.*"]),
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        # Test suite, including the in-process fake service
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "fastapi>=0.109.0",
            "python-multipart>=0.0.6",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Text Processing :: Linguistic",
    ],
)
