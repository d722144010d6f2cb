# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from setuptools import setup, find_packages

setup(
    name="bsvwrap",
    version="0.1.0",
    description="Embed synthesized Verilog/VHDL modules in BSV designs through generated BVI wrappers",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["bsvwrap", "bsvwrap.*"]),
    package_data={
        "bsvwrap": ["templates/*.j2"],
    },
    install_requires=[
        "click>=8.1",
        "jinja2>=3.1",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Programming Language :: Python",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    ],
    license="MIT",
    entry_points={
        'console_scripts': [
            'bsvwrap=bsvwrap.cli:main',
        ],
    },
    python_requires=">=3.10",
)
