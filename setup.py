# setup.py
from setuptools import setup

setup(
    name="VoxelSandbox",
    version="0.1.0",
    packages=["world", "game", "engine"],
    install_requires=["panda3d"],
    extras_require={"tests": ["pytest"]},
)
