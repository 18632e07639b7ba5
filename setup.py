# setup.py
from setuptools import setup, find_packages

setup(
    name="dirtree",
    version="1.0.0",
    description="Graphically displays the directory structure of a path",
    author="Jenna Fligor",
    author_email="jenna@fligor.net",
    license="MIT",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "dirtree": ["interface/locales/*.json"],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirtree=dirtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
