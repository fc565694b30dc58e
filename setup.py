from setuptools import setup, find_packages

setup(
    name="imam-cli",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "imam_cli": [
            "config.json",
        ]
    },
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "openpyxl",
        "lxml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "imam-cli = imam_cli.cli:main",
        ],
    },
)
