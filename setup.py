from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="redis-availability-probe",
    version="1.0.0",
    description="Single-shot Redis availability probe for external monitoring schedulers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Monitoring Team",
    packages=find_packages(exclude=["examples"]),
    install_requires=[
        "redis>=5.0.0",
        "click>=8.0.0"
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.0.0",
            "black>=21.0.0",
            "flake8>=3.8.0",
            "mypy>=0.800"
        ]
    },
    entry_points={
        'console_scripts': [
            'redis-availability-probe=redis_probe.cli:cli',
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Database",
        "Topic :: System :: Networking :: Monitoring",
    ],
)
