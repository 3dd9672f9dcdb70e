from setuptools import setup, find_namespace_packages


setup(
    name="mpm",
    version="0.1.0",
    description="Multiple pattern matching over a Burrows-Wheeler FM index",
    package_dir={"": "backend"},
    packages=find_namespace_packages(where="backend", include=["matcher", "matcher.*", "api"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "psutil",
        "fastapi",
        "pydantic>=2",
        "python-multipart",
    ],
    extras_require={
        "test": ["pytest", "httpx"],
    },
    entry_points={
        "console_scripts": ["mpm=matcher.main:main"],
    },
    zip_safe=False,
)
