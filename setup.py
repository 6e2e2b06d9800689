import os

from setuptools import find_packages, setup


VERSION = "0.1.0"
PYTHON_REQUIRES = ">=3.9"


def read(*names, **kwargs):
    with open(
        os.path.join(os.path.dirname(__file__), *names),
        encoding=kwargs.get("encoding", "utf8"),
    ) as fh:
        return fh.read()


setup(
    name="seglit",
    version=VERSION,
    description="Composable segmented literals: text with separately addressable interpolated values",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    python_requires=PYTHON_REQUIRES,
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    keywords="template literal sql query fragment interpolation",
    install_requires=["pyrsistent"],
    extras_require={"test": ["pytest"]},
    packages=find_packages("src"),
    package_dir={"": "src"},
)
