""" penguin_coin build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import penguin_coin

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=penguin_coin.name,
    version=penguin_coin.__version__,
    license=penguin_coin.__license__,
    author=penguin_coin.__author__,
    author_email=penguin_coin.__author_email__,
    description="Prime field and elliptic curve point arithmetic",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords="finite-field prime-field elliptic-curves group-law",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
