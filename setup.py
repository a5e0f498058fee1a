from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent

setup(
    name="wcli",
    version="1.0.0",
    packages=find_packages(include=["wcli", "wcli.*"]),
    include_package_data=True,
    entry_points={"console_scripts": ["wcli=wcli.main:main"]},
    install_requires=["rich>=13.0.0", "rich-argparse", "python-dotenv>=1.0.0"],
    extras_require={"test": ["pytest>=7.0"]},
    author="Josh Bassett",
    description="Interactive shell for running commands on a remote host over SSH",
    long_description=(here / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    url="https://github.com/Taghunter98/wcli",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: POSIX",
    ],
    python_requires=">=3.8",
)
