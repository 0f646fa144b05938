from setuptools import find_packages, setup


setup(
    name="flagfile",
    version="1.0.0",
    description="Convert flag files into command-line flag arguments",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["flagfile=flagfile.cli:main"]},
)
