# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirwalk",
    version="1.0.0",
    description="Recursive, type-filtered directory listing with locale-aware sorting",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirwalk", "dirwalk.*"]),
    package_data={
        "dirwalk.interface": ["locales/*.json"],
        "dirwalk.interface.locales": ["*.json"],
    },
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirwalk=dirwalk.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Environment :: Console",
    ],
)
