""" ledgerhd build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ledgerhd

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ledgerhd.name,
    version=ledgerhd.__version__,
    license=ledgerhd.__license__,
    author=ledgerhd.__author__,
    author_email=ledgerhd.__author_email__,
    description="Ledger-style BIP32-Ed25519 hard-only key derivation",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ledgerhd": ["_data/*.json"]},
    include_package_data=True,
    install_requires=["pynacl>=1.4.0"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ledgerhd=ledgerhd.__main__:main"]},
    keywords=(
        "ed25519 bip32-ed25519 ledger hd-wallet key-derivation "
        "polkadot kusama substrate ss58"
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
