#!/usr/bin/env python3
"""
vdom Setup
"""

from setuptools import setup, find_packages


def read_requirements(path):
    with open(path) as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]


# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="vdom",
    version="1.0.0",
    description="A read-only virtual DOM with html reconstruction, selectors and structural comparison",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        "test": read_requirements('requirements-test.txt'),
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Testing",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="dom, html, testing, css selectors",
)
