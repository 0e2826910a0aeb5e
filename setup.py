import setuptools

with open("README.md", "rt") as f:
    long_description = f.read()

setuptools.setup(
    name="docmod",
    version="0.1.0",
    description="Document-database style update operators for nested dicts",
    license="MIT license",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=['pyparsing>=3,<4',],
    extras_require={'test': ['pytest']},
)
