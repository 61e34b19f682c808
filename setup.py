# setup.py
from setuptools import setup, find_packages

setup(
    name="bundlesizer",
    version="0.1.0",
    description="Transitive raw and compressed size report for bundler build manifests",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "Brotli>=1.1",  # compressed-size estimate
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'bundlesizer=bundlesizer.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
