from os import path

from setuptools import setup, find_namespace_packages

# Get the long description from the README file
here = path.abspath(path.dirname(__file__))
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="nrel.transport",
    version="0.1.0",
    description=
    "A small fleet dispatch core: taxis and buses, per-kind drivers, capacity-limited boarding and departures.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.8",
        "Topic :: Scientific/Engineering"
    ],
    packages=find_namespace_packages(include=["nrel.*"]),
    python_requires=">=3.8",
    install_requires=[
        "immutables",
        "PyYAML",
        "returns",
        "rich",
    ],
    extras_require={
        "dev": ["pytest", "black"],
    },
    include_package_data=True,
    package_data={
        "nrel.transport.resources": ["defaults/*.yaml", "scenarios/*.yaml"]
    },
    entry_points={
        'console_scripts': [
            'transport-demo=nrel.transport.app.run:run',
        ],
    },
    keywords="transportation fleet dispatch taxi bus driver assignment"
)
