# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="deeptree",
    version="0.1.0",
    description="Generador de arboles de modulos JavaScript para pruebas de carga de bundlers y watchers",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["deeptree*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'deeptree=deeptree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
