# -*- coding: utf-8 -*-
"""
Created on Mon Sep  1 11:50:24 2025

@author: p-sik
"""

import setuptools

def get_version():
    with(open("src/Convert4D/__init__.py", "r")) as fh:
        for line in fh:
            if line.startswith("__version__"):
                delim = '"' if '"' in line else "'"
                return line.split(delim)[1]
        else:
            raise RuntimeError("Unable to find version string.")

def get_long_description():
    with open("README.md", "r") as fh: description = fh.read()
    return(description)

setuptools.setup(
    name="Convert4D",
    version=get_version(),
    author="Pavlina Sikorova",
    author_email="pavlinasik@isibrno.cz",
    description=\
        "Conversions between 4D pixel arrays, tables, rasters and grids.",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    url="https://github.com/pavlinasik/Convert4D/",
    project_urls={},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent"],
    license='MIT',
    package_dir={"":"src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib>=3.5",
        "xarray",
        "tqdm",
        "toml; python_version<'3.11'",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True)
