from setuptools import setup, find_packages

setup(
    name="declang",
    version="0.1.0",
    description="declang — compile set/define declarations to let/const statements",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.84",
        ],
    },
    entry_points={
        "console_scripts": [
            "declang=declang.cli:main",
        ],
    },
)
