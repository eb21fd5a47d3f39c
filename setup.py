from setuptools import find_packages, setup

setup(
    name="snakegeom",
    version="0.1.0",
    description="Line and arc segment intersection for 2D path collision",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
