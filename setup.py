from setuptools import setup, find_packages

setup(
    name="pixelgrid",
    version="0.1.0",
    description="Un mini-éditeur de pixel art en grille, en PyQt5",
    author="Vous",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PyQt5>=5.15"
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "gui_scripts": [
            "pixelgrid = pixelgrid.__main__:main"
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: PyQt5"
    ],
)
