import setuptools

import os
import os.path

import site
import sys

site.ENABLE_USER_SITE = "--user" in sys.argv[1:]


def long_description():
    here = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(here, "README.md")) as infile:
        return infile.read()


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


setuptools.setup(
    name="pyvec2",
    version=read("src/pyvec2/version.txt"),
    description="2D vector value type for simulation and graphics code",
    long_description=long_description(),
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    package_data={"pyvec2": ["version.txt"]},
    include_package_data=True,
    install_requires=["numpy>=1.21"],
    extras_require={
        "examples": ["matplotlib>=3.5"],
        "test": ["pytest>=7", "hypothesis>=6", "matplotlib>=3.5"],
    },
)
