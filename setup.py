from setuptools import setup
from argsx.const import VERSION_STR, DESCRIPTION

setup(
    name="argsx",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["argsx"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "argsx = argsx:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
