from setuptools import setup

setup(
    name="arpmath",
    version="0.1.0",  # Match arpmath.version
    description="Arbitrary-precision logarithm, exponential, power, AGM and pi",
    author="Nadav Rotem",
    author_email="nadav256@gmail.com",
    install_requires=["gmpy2>=2.1"],
    extras_require={
        "examples": ["numpy"],
        "test": ["pytest"],
    },
    package_data={"arpmath": ["py.typed"]},
    packages=["arpmath"],
    zip_safe=False,
    python_requires=">=3.8",
)
