from setuptools import setup, find_packages

setup(
    name="lot-renamer",
    version="1.0.0",
    description="Rename auction inventory photos after their lot numbers using a tab-delimited data file",
    author="Ashwin Nair",
    packages=find_packages(include=["lot_common", "lot_common.*", "lot_rename", "lot_rename.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
        "rich>=13.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "lot-rename = lot_rename.cli:main",
        ],
    },
)
