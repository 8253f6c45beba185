from setuptools import setup, find_packages


setup(
    name="wadtoc",
    version="0.1",
    packages=find_packages(include=["wadtoc", "wadtoc.*"]),
    description="Reader for the header and table of contents of RW WAD archives.",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "wadtoc=wadtoc.cli:main",
        ]
    },
)
