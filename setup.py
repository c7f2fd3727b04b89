from setuptools import setup, find_packages

setup(
    name="tunebridge",
    version="0.1",
    packages=find_packages(include=["tunebridge", "tunebridge.*"]),
    package_data={"tunebridge": ["config/*.json"]},
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['tunebridge=tunebridge.main:main'],
    },
    python_requires='>=3.8',
)
