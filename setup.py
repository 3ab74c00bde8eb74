# setup.py
from setuptools import setup, find_packages

setup(
    name="quickobj",
    version="1.0.0",
    description="Wavefront OBJ/MTL mesh loader",
    packages=find_packages(include=["quickobj", "quickobj.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
