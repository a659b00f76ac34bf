from setuptools import find_packages, setup

setup(
    name="isocal",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "isocal=isocal.cli:main",
        ],
    },
)
