import setuptools

from tinyhome import __version__

with open("README.md", "r") as fh:
    long_description = fh.read()

INSTALL_REQUIRES = [
    'colorama',      # Makes ANSI escape character sequences work under MS Windows.
]

setuptools.setup(
    name="tinyhome",
    version=__version__,
    author="tinyhome",
    description="Python module demonstrating a small smart home of lights, thermostats and doors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=("tests",)),
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["tinyhome=tinyhome.__main__:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
