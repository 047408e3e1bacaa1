from setuptools import find_packages, setup


setup(
    name="niji-templates",
    version="0.3.0",
    description="Logic-less template language with redefinable delimiters and formattable values",
    author="niji",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
)
