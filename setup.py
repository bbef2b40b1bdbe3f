import setuptools

if __name__ == "__main__":
    setuptools.setup(
        name="halton",
        version="0.4.0",
        description="Fast generation of Halton low-discrepancy sequences with numba batch kernels",
        long_description=open("README.md", encoding="utf-8").read(),
        long_description_content_type="text/markdown",
        license="MIT",
        python_requires=">=3.9",
        packages=setuptools.find_packages(where="src") or setuptools.find_packages(),
        package_dir={"": "src"} if (setuptools.find_packages(where="src")) else {},
        install_requires=[
            "numpy>=1.24,<3.0",
            "numba>=0.59",
        ],
        extras_require={
            "test": ["pytest>=7"],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3 :: Only",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
        ]
    )
