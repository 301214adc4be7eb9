from setuptools import setup, find_namespace_packages

setup(
    name="miniserve",
    version="0.0.1",
    author="miniserve contributors",
    description="serve a file or a directory over http",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["miniserve*"]),
    python_requires=">=3.9",
    install_requires=[
        "flask",
        "werkzeug",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "miniserve=miniserve.__main__:main",
        ],
    },
)
