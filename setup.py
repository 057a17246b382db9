from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "scour>=0.38.2",
    "defusedxml>=0.7.1",
    "tqdm>=4.65.0",
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0",
]

setup(
    name="svgify",
    version="1.0.0",
    description="Convert a directory of SVG icons into React components and an icon registry",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svgify=svgify.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: Code Generators",
    ],
)
