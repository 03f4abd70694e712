from setuptools import setup, find_packages

setup(
    name="exactrational",
    version="1.0.0",
    description="Exact rational number arithmetic in canonical reduced form",
    long_description=("Immutable rational numbers that are always reduced to lowest terms with a positive "
                      "denominator. Supports addition, subtraction, multiplication, division and integer "
                      "powers, with exact conversion to fractions.Fraction, sympy and numpy object arrays."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(include=["exactrational", "exactrational.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational", "fraction", "exact arithmetic", "gcd"],
    zip_safe=False,
)
