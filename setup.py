import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="planar",
    version="0.1",
    description="Points in the Euclidean plane, and the distance between them",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression",
        "numpy",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "pytest",
        ],
    },
)
