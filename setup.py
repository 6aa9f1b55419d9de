from setuptools import setup, find_packages

setup(
    name="dtsx-inventory",
    version="1.0.0",
    description="Inventory and SQL extraction for SSIS .dtsx packages",
    author="SSIS Migration Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.5.0",
        "pyyaml>=6.0",
        "jinja2>=3.1.0",
        "click>=8.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'dtsx-inventory=dtsx_inventory.cli:cli',
        ],
    },
    python_requires=">=3.8",
)
