# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="archive-listing",
    version="1.0.0",
    description="Browse a flat object-storage bucket as a pseudo-directory tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["archive_listing*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'archive-listing=archive_listing.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
