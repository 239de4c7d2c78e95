# Package installation script

from setuptools import setup, find_packages

setup(
    name="home_control",
    version="0.1.0",
    packages=find_packages(where="src", exclude=["tests", "tests.*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "home_control=home_control.__main__:main",
        ],
    },
    install_requires=[
        "pydantic>=2",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)
