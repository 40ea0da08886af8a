from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="geomag",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        "pyyaml>=5.4.1",
        "ppigrf>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=2.12",
            "black>=21.5b2",
            "mypy>=0.910",
            "pylint>=2.8.2",
            "flake8>=3.9.2",
        ],
    },
    entry_points={
        "console_scripts": [
            "geomag=geomag.main:main",
        ],
    },
    description="Earth magnetic field lookup from coarse geomagnetic tables",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    python_requires=">=3.8",
)
