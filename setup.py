# setup.py
from setuptools import setup, find_packages

setup(
    name="obj2webgl",
    version="1.0.0",
    description="Wavefront OBJ to indexed GPU mesh and WebGL code converter",
    packages=find_packages(include=["obj2webgl", "obj2webgl.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "PyOpenGL>=3.1.5",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["obj2webgl=obj2webgl.cli:main"],
    },
)
