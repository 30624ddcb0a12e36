""" zerucrypt build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import zerucrypt

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=zerucrypt.name,
    version=zerucrypt.__version__,
    license=zerucrypt.__license__,
    author=zerucrypt.__author__,
    author_email=zerucrypt.__author_email__,
    description="Bitcoin-style message signatures for ZeroNet-like content",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"zerucrypt": ["_data/*.json"]},
    include_package_data=True,
    install_requires=["coincurve", "dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "bitcoin cryptography secp256k1 ecdsa RFC-6979 base58 wif "
        "p2pkh message-signing zeronet"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
