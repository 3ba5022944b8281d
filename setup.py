import setuptools


with open("README.md", "r") as readme_file:
    readme = readme_file.read()

setuptools.setup(
    name="squares",
    version="0.1.0",
    description="QR, Micro QR and rMQR code generator with no dependencies",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": ["squares=squares.barcode:main"]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.6"
)
