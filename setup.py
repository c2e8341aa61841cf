from setuptools import setup, find_packages

setup(
    name="minitoken",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "pynacl>=1.5.0",
    ],
    extras_require={
        "test": [
            "hypothesis>=6.0",
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "minitoken=main:main",
        ],
    },
    python_requires=">=3.8",
)
