import re
from setuptools import setup


def readme():
    """Read README.rst for the long description"""
    with open('README.rst') as f:
        lines = f.readlines()

    return("".join(lines))


def get_requirements():
    with open("requirements.txt") as f:
        reqs = f.read().splitlines()

    return(reqs)


def get_metadata(name):
    """Extract a dunder attribute from the package without importing it"""
    with open("skdiel/__init__.py") as f:
        src = f.read()
    match = re.search(r"^__{}__ = [\"']([^\"']+)[\"']".format(name),
                      src, re.M)

    return(match.group(1))


REQUIREMENTS = get_requirements()
DEV_REQUIRES = ["ipython", "jupyter", "netCDF4"]
PACKAGES = ["skdiel", "skdiel.tests"]

setup(
    name="scikit-diel",
    version=get_metadata("version"),
    python_requires=">=3.8",
    packages=PACKAGES,
    include_package_data=True,
    install_requires=REQUIREMENTS,
    extras_require={
        "dev": DEV_REQUIRES,
        "test": ["pytest"]
    },
    # metadata for upload to PyPI
    author="scikit-diel developers",
    description=("Detection of diel vertical movement from "
                 "time-at-depth distributions"),
    long_description=readme(),
    long_description_content_type="text/x-rst",
    license=get_metadata("license"),
    keywords=["animal behaviour", "biology", "behavioural ecology",
              "diving", "diel vertical migration", "time at depth"],
    classifiers=["Development Status :: 4 - Beta",
                 "Programming Language :: Python :: 3",
                 "Intended Audience :: Science/Research",
                 ("License :: OSI Approved :: "
                  "GNU Affero General Public License v3"),
                 "Topic :: Scientific/Engineering"]
)
