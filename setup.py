from setuptools import setup, find_namespace_packages

setup(
    name="library_catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'catalog*']),
    include_package_data=True,
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "pydantic>=2.0",
        "bcrypt",
        "alembic",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "catalog=cli.main:main",
        ],
    },
)
