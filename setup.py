from setuptools import setup, find_packages

setup(
    name="connect4-engine",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4=connect4_engine.interfaces.cli:main",
        ],
    },
)
