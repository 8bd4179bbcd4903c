# setup.py - Package configuration for the eBPF compiler driver

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="compile-ebpf",
    version="0.1.0",
    author="CloudClub",
    author_email="example@cloudclub.com",
    description="Compile eBPF C sources with clang and vendored libbpf headers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/cloudclub/compile-ebpf",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "compile_ebpf": ["headers/bpf/*.h"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Build Tools",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "compile-ebpf=compile_ebpf.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
