from setuptools import setup, find_packages

setup(
    name="discmesh",
    version="0.1.0",
    description="Triangle fan meshes of discs embedded in 3D space",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "meshio",
    ],
    extras_require={
        "test": ["pytest", "shapely"],
    },
    entry_points={
        "console_scripts": [
            "discmesh = discmesh.application:main",
        ],
    },
)
