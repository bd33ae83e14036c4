from setuptools import setup, find_packages

setup(
    name="mat2",
    version="1.0",
    description="Dense generic matrices with Gauss-Jordan reduction to reduced row-echelon form",
    long_description=("Two-dimensional matrices over any numeric element type, with structural row and column "
                      "operations, elementary row operations, Gauss-Jordan elimination and an RREF test"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["mat2", "mat2.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "linear algebra", "gauss-jordan", "row echelon form"],
    zip_safe=False,
)
