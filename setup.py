# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="repo-structure",
    version="0.1.0",
    description="Tagged snapshot of a git repository's tracked file tree for AI assistants",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["repostructure*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'repo-structure=repostructure.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
