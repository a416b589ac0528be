from setuptools import find_packages, setup

setup(
    name="node-bootstrap",
    python_requires=">=3.9",
    version="1.0.0",
    packages=[p for p in find_packages() if "tests" not in p],
    package_data={"node_bootstrap.core": ["configs/*.yaml"]},
    install_requires=[
        "appdirs>=1.4.4",
        "haikunator>=2.1.0",
        "json-log-formatter>=0.5.2",
        "opentelemetry-api>=1.20.0",
        "opentelemetry-sdk>=1.20.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
)
