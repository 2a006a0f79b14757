from setuptools import setup, find_packages

setup(
    name="seamrpc",
    version="0.1.0",
    description="seamrpc - JSON-RPC 2.0 server and client engine",
    author="seamrpc Team",
    packages=find_packages(include=["seamrpc", "seamrpc.*"]),
    install_requires=[
        "pyzmq>=24.0.0",
        "httpx>=0.24.0",
        "starlette>=0.27.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-benchmark",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
