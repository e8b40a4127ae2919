from setuptools import setup, find_packages

setup(
    name="grid_demo",
    version="0.1.0",
    packages=find_packages(exclude=["grid_demo.tests"]),
    package_data={"grid_demo": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid_demo=grid_demo.scripts.run_demo:main",
        ]
    },
)
