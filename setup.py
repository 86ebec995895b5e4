#!/usr/bin/env python
from setuptools import (
    find_packages,
    setup,
)

extras_require = {
    "dev": [
        "build>=0.9.0",
        "twine",
        "wheel",
    ],
    "pad": [
        "eth-utils>=2.0.0",
    ],
    "test": [
        "hypothesis>=5",
        "pytest>=7.0.0",
        "pytest-xdist>=3.0",
    ],
}


extras_require["dev"] = (
    extras_require["dev"] + extras_require["pad"] + extras_require["test"]
)

install_requires = extras_require["pad"]

with open("README.md") as readme_file:
    long_description = readme_file.read()

setup(
    name="pad-left",
    version="0.1.0",
    description="Left pad text to a minimum length with any fill character",
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.8, <4",
    extras_require=extras_require,
    license="MIT",
    zip_safe=False,
    keywords="string padding left-pad",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"pad_left": ["py.typed"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
