import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="httpfile",
    version="0.1.0",
    description="parser for .http request files",
    license="MIT",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="http parser rest-client",
    packages=["httpfile"],
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "httpfile=httpfile.cli:main",
        ],
    },
    install_requires=[],
)
