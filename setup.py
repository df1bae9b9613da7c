from setuptools import setup, find_namespace_packages

with open("requirements.txt") as f:
    requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

setup(
    name="usagi-shopping-list",
    version="1.0.0",
    packages=find_namespace_packages(include=["src", "src.*"]),
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "usagi=src.main:main",
        ],
    },
)
