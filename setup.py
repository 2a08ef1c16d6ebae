from setuptools import setup
from optextract.const import VERSION_STR, DESCRIPTION

setup(
    name="optextract",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["optextract"],
    install_requires=[
        "graphviz"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "optx = optextract:main",
            "optextract = optextract:main",
            "optextract-graph = optextract.graph:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
