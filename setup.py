from setuptools import find_namespace_packages, setup

setup(
    name="pym3u",
    version="0.1.0",
    description="M3U playlist parser and channel catalog builder",
    packages=find_namespace_packages(include=("pym3u", "pym3u.*")),
    python_requires=">=3.11",
    install_requires=[
        "requests",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "dev": [
            "black",
            "pytest",
            "isort",
        ]
    },
    entry_points={
        "console_scripts": [
            "pym3u=pym3u.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
)
